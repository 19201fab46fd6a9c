"""Store, registers, and actions.

Architecture Note:
    store/ is the stateful layer. A Store owns the root state cell, its
    dispatch phase, and the listener registry; registers and actions only
    hold references back to it.
"""

from bookie.store.action import Action, adapt_transition
from bookie.store.listeners import ListenerRegistry, Subscription
from bookie.store.register import ActionFactory, Register
from bookie.store.store import (
    BookieError,
    DispatchPhase,
    ReentrantDispatchError,
    Store,
    create_store,
)

__all__ = [
    "Store",
    "create_store",
    "DispatchPhase",
    "BookieError",
    "ReentrantDispatchError",
    "Register",
    "ActionFactory",
    "Action",
    "adapt_transition",
    "Subscription",
    "ListenerRegistry",
]
