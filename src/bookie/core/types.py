"""Core type definitions for bookie."""

from collections.abc import Callable, Hashable
from typing import Any, TypeAlias

State: TypeAlias = Any
"""Application-defined state: a scalar, or a mapping from scope key to sub-state.

Published states are write-protected snapshots. Mutating them does NOT affect
the store; to change state, dispatch an action.
"""

ScopeKey: TypeAlias = Hashable
"""Key naming one slice of a state mapping."""

Payload: TypeAlias = Any

Transition: TypeAlias = Callable[[State, Payload], State]
"""Pure function computing the next (scoped) state from the current one and a payload."""

Listener: TypeAlias = Callable[[State], None]
