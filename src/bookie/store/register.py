"""Registers: scoped views that mint actions over one slice of the root state.

Usage:
    store = create_store()
    session = store.create_register("session", {"user": None})
    prefs = session.create_register("prefs")

    set_theme = prefs.create_action(lambda prefs, theme: {**(prefs or {}), "theme": theme})
    set_theme("dark")
    store.get_state()["session"]["prefs"]  # {'theme': 'dark'}

Each nesting level wraps the transition in exactly one scope indirection and
hands it to its parent, so every register action still runs through the
root store's single dispatch path.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from bookie.core.merge import get_scope, set_scope
from bookie.core.types import Payload, ScopeKey, State
from bookie.store.action import adapt_transition, transition_name

if TYPE_CHECKING:
    from bookie.store.action import Action


@runtime_checkable
class ActionFactory(Protocol):
    """Anything registers can be nested under: a Store or another Register."""

    @property
    def path(self) -> tuple[ScopeKey, ...]:
        """Scope keys from the root store down to this factory."""
        ...

    def create_action(self, transition: Any, *, name: str | None = None) -> Action:
        """Bind a transition over this factory's state."""
        ...


@dataclass(frozen=True, slots=True, eq=False)
class Register:
    """Capability to read and write state[scope] of its parent through actions.

    Holds no state. Registers expose no get_state()/subscribe(); only the
    root store observes state.

    Attributes:
        scope: Key of this register's slice in its parent's state.
        parent: Store or Register this register is nested under.
    """

    scope: ScopeKey
    parent: ActionFactory

    @property
    def path(self) -> tuple[ScopeKey, ...]:
        return (*self.parent.path, self.scope)

    def create_action(self, transition: Callable[..., Any], *, name: str | None = None) -> Action:
        """Bind a transition over this register's slice.

        The transition receives state[scope] (None while absent) and its
        result is merged back with set_scope() before reaching the parent.

        Args:
            transition: Function (scoped_state, payload) -> scoped_state,
                or scoped_state -> scoped_state.
            name: Display name for logs. Defaults to the function name.

        Returns:
            Action dispatching through the root store.
        """
        scoped = adapt_transition(transition)
        scope = self.scope
        display_name = transition_name(transition, name)

        def scoped_transition(state: State, payload: Payload) -> State:
            return set_scope(state, scope, scoped(get_scope(state, scope), payload))

        scoped_transition.__name__ = display_name
        action = self.parent.create_action(scoped_transition, name=display_name)
        return replace(action, path=self.path)

    def create_register(self, scope: ScopeKey) -> Register:
        """Create a child register over state[self.scope][scope].

        The child slice stays absent until one of its actions writes it.
        """
        return Register(scope=scope, parent=self)

    def __repr__(self) -> str:
        return f"Register(path={self.path!r})"
