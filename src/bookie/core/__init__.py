"""Core primitives: state types, write-protection, and immutable merge.

Architecture Note:
    core/ is stateless. Everything here is a pure function or an immutable
    value; the stateful container lives in store/.
"""

from bookie.core.frozen import FrozenState, UnprotectedStateWarning, freeze, is_protected
from bookie.core.merge import get_scope, set_scope
from bookie.core.types import Listener, Payload, ScopeKey, State, Transition

__all__ = [
    # Types
    "State",
    "ScopeKey",
    "Payload",
    "Transition",
    "Listener",
    # Write protection
    "FrozenState",
    "UnprotectedStateWarning",
    "freeze",
    "is_protected",
    # Merge
    "get_scope",
    "set_scope",
]
