"""Immutable merge helpers for scoped state.

Usage:
    state = set_scope(None, "foo", 0)        # FrozenState({'foo': 0})
    state = set_scope(state, "bar", 0)       # FrozenState({'foo': 0, 'bar': 0})
    set_scope(state, "foo", state["foo"])    # same object returned, nothing changed
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bookie.core.frozen import FrozenState
from bookie.core.types import ScopeKey, State

_MISSING = object()


def get_scope(state: State, scope: ScopeKey) -> Any:
    """Read one slice of a state mapping.

    Args:
        state: Parent state (may be None or a scalar).
        scope: Key of the slice.

    Returns:
        The slice value, or None when state is not a mapping or lacks the key.
    """
    if isinstance(state, Mapping):
        return state.get(scope)
    return None


def set_scope(state: State, scope: ScopeKey, value: Any) -> State:
    """Replace one key of a state mapping without mutating it.

    A non-mapping state (None or a scalar) is treated as empty, so the
    result holds only the new key.

    Args:
        state: Parent state to derive from. Left untouched.
        scope: Key to replace.
        value: New value for the key.

    Returns:
        state itself if it already holds exactly this value at scope,
        otherwise a new FrozenState sharing every sibling value.
    """
    is_mapping = isinstance(state, Mapping)
    existing = state.get(scope, _MISSING) if is_mapping else _MISSING
    if existing is value:
        return state

    data = dict(state) if is_mapping else {}
    data[scope] = value
    return FrozenState(data)
