"""Shallow write-protection for published state snapshots.

Usage:
    snapshot = freeze({"user": "ada", "tags": ["a", "b"]})
    snapshot["user"] = "bob"  # TypeError: FrozenState is read-only

    # Protection is shallow: nested values are shared, not frozen.
    snapshot["tags"]  # the very same list object
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator, Mapping
from dataclasses import is_dataclass
from enum import Enum
from typing import Any

from bookie.core.types import ScopeKey, State

_IMMUTABLE_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    range,
    Enum,
    type,
)


class UnprotectedStateWarning(UserWarning):
    """Emitted when a published state value cannot be write-protected."""

    pass


class FrozenState(Mapping[ScopeKey, Any]):
    """Read-only mapping used for every published mapping state.

    Compares equal to any mapping with the same items, so
    ``FrozenState({"a": 1}) == {"a": 1}`` holds.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[ScopeKey, Any] | None = None):
        object.__setattr__(self, "_data", dict(data) if data is not None else {})

    def __getitem__(self, key: ScopeKey) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[ScopeKey]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __reduce__(self) -> tuple[type[FrozenState], tuple[dict[ScopeKey, Any]]]:
        return (type(self), (self._data,))

    def to_dict(self) -> dict[ScopeKey, Any]:
        """Return a mutable shallow copy.

        Returns:
            New dict with the same items. Editing it does not affect this snapshot.
        """
        return dict(self._data)


def _is_frozen_dataclass(value: Any) -> bool:
    return is_dataclass(value) and type(value).__dataclass_params__.frozen  # type: ignore[union-attr]


def _is_frozen_pydantic(value: Any) -> bool:
    """Check for a frozen Pydantic model without importing pydantic.

    Args:
        value: Instance to check.

    Returns:
        True if value is a pydantic BaseModel instance configured with frozen=True.
    """
    cls = type(value)
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            config = getattr(cls, "model_config", None) or {}
            return bool(config.get("frozen", False))
    return False


def is_protected(value: Any) -> bool:
    """Check whether a value is already safe to publish as is.

    Args:
        value: Candidate state value.

    Returns:
        True if the value cannot be mutated in place at its top level.
    """
    if isinstance(value, (FrozenState, *_IMMUTABLE_TYPES)):
        return True
    return _is_frozen_dataclass(value) or _is_frozen_pydantic(value)


def freeze(value: State, *, sequences: bool = True, warn: bool = True) -> State:
    """Return a write-protected, shallow version of value.

    Already-immutable values are returned unchanged, so reference identity
    is preserved for them. Mappings are copied into a FrozenState.

    Args:
        value: State to protect.
        sequences: Convert list/set/bytearray to tuple/frozenset/bytes.
        warn: Emit UnprotectedStateWarning for values that stay mutable.

    Returns:
        Write-protected state.
    """
    if is_protected(value):
        return value
    if isinstance(value, Mapping):
        return FrozenState(value)
    if sequences:
        if isinstance(value, list):
            return tuple(value)
        if isinstance(value, set):
            return frozenset(value)
        if isinstance(value, bytearray):
            return bytes(value)
    if warn:
        warnings.warn(
            f"State of type {type(value).__name__} cannot be write-protected; "
            f"it is published as is and in-place mutation will leak into the store.",
            UnprotectedStateWarning,
            stacklevel=2,
        )
    return value
