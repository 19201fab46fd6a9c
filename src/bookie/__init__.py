"""bookie: a minimal unidirectional-data-flow state container.

Usage:
    from bookie import create_store

    store = create_store()
    foo = store.create_register("foo", 0)
    bar = store.create_register("bar", 0)

    increment_foo = foo.create_action(lambda count: count + 1)

    unsubscribe = store.subscribe(lambda state: print(dict(state)))
    increment_foo()   # prints {'foo': 1, 'bar': 0}
    unsubscribe()
"""

__version__ = "0.1.0"

# Configuration
from bookie.config import StoreSettings

# Core primitives
from bookie.core import (
    FrozenState,
    Listener,
    ScopeKey,
    State,
    Transition,
    UnprotectedStateWarning,
    freeze,
    get_scope,
    set_scope,
)

# Store and composition
from bookie.store import (
    Action,
    BookieError,
    DispatchPhase,
    ReentrantDispatchError,
    Register,
    Store,
    Subscription,
    create_store,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "State",
    "ScopeKey",
    "Transition",
    "Listener",
    "FrozenState",
    "freeze",
    "get_scope",
    "set_scope",
    "UnprotectedStateWarning",
    # Store
    "create_store",
    "Store",
    "DispatchPhase",
    "Register",
    "Action",
    "Subscription",
    "BookieError",
    "ReentrantDispatchError",
    # Config
    "StoreSettings",
]
