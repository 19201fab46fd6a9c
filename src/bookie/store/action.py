"""Bound actions and transition adaptation.

Usage:
    increment = store.create_action(lambda state: state + 1)
    add = store.create_action(lambda state, amount: state + amount)

    increment()   # payload defaults to None
    add(5)
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bookie.core.types import Payload, ScopeKey, State, Transition

if TYPE_CHECKING:
    from bookie.store.store import Store

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def adapt_transition(fn: Callable[..., State]) -> Transition:
    """Normalize a transition to the (state, payload) calling convention.

    A callable taking exactly one positional parameter is wrapped so the
    payload is dropped. Anything else, including callables whose signature
    cannot be inspected, is assumed to accept (state, payload) already.

    Args:
        fn: User-supplied transition function.

    Returns:
        Transition accepting (state, payload).
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return fn

    params = signature.parameters.values()
    if any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params):
        return fn
    if sum(1 for p in params if p.kind in _POSITIONAL) != 1:
        return fn

    def ignore_payload(state: State, payload: Payload) -> State:
        return fn(state)

    ignore_payload.__name__ = transition_name(fn)
    return ignore_payload


def transition_name(fn: Callable[..., Any], name: str | None = None) -> str:
    """Display name for an action, used in logs and reprs."""
    if name:
        return name
    return getattr(fn, "__name__", None) or type(fn).__name__


@dataclass(frozen=True, slots=True)
class Action:
    """Callable that performs one guarded state transition on its store.

    Holds closures, not data: the root-level transition already contains
    every scope indirection between its defining register and the store.

    Attributes:
        store: Store whose dispatch path the action funnels through.
        transition: Transition over the whole root state.
        name: Display name (defaults to the user function's __name__).
        path: Scope keys from the root store down to the defining register.
    """

    store: Store
    transition: Transition
    name: str = "action"
    path: tuple[ScopeKey, ...] = ()

    def __call__(self, payload: Payload = None) -> None:
        """Dispatch the transition with payload.

        Raises:
            ReentrantDispatchError: If the store is already dispatching.
        """
        self.store.dispatch(self.transition, payload)

    def __repr__(self) -> str:
        scope = "/".join(str(key) for key in self.path) or "<root>"
        return f"Action({self.name!r}, path={scope!r})"
