"""Store: single owner of the root state, its dispatch guard, and listeners.

Usage:
    store = create_store(0)
    increment = store.create_action(lambda state: state + 1)

    unsubscribe = store.subscribe(print)
    increment()       # prints 1
    unsubscribe()

    # Scoped slices of the root state
    store = create_store()
    foo = store.create_register("foo", 0)
    foo.create_action(lambda count: count + 1)()
    store.get_state()  # FrozenState({'foo': 1})
"""

from __future__ import annotations

import logging
import warnings
from enum import Enum, auto
from typing import Any

from bookie.config import StoreSettings
from bookie.core.frozen import freeze
from bookie.core.merge import set_scope
from bookie.core.types import Listener, Payload, ScopeKey, State, Transition
from bookie.store.action import Action, adapt_transition, transition_name
from bookie.store.listeners import ListenerRegistry, Subscription
from bookie.store.register import Register

_logger = logging.getLogger(__name__)


class BookieError(Exception):
    """Base class for errors raised by bookie."""

    pass


class ReentrantDispatchError(BookieError, RuntimeError):
    """Raised when an action is dispatched while another dispatch is in progress."""

    pass


class DispatchPhase(Enum):
    """Dispatch state machine of a store."""

    IDLE = auto()
    DISPATCHING = auto()


class Store:
    """Unidirectional state container.

    The root state only changes through dispatch(), one transition at a
    time. Each published state is a write-protected snapshot. Listeners are
    notified synchronously, in subscription order, after every change.
    """

    def __init__(self, initial_value: State = None, settings: StoreSettings | None = None):
        self._settings = settings if settings is not None else StoreSettings()
        self._listeners = ListenerRegistry()
        self._phase = DispatchPhase.IDLE
        self._state: State = self._freeze(initial_value)

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def phase(self) -> DispatchPhase:
        return self._phase

    @property
    def is_dispatching(self) -> bool:
        """True while a transition or its listener notifications are running."""
        return self._phase is DispatchPhase.DISPATCHING

    @property
    def path(self) -> tuple[ScopeKey, ...]:
        """Scope path of the root state (always empty)."""
        return ()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _freeze(self, value: State) -> State:
        return freeze(
            value,
            sequences=self._settings.freeze_sequences,
            warn=self._settings.warn_unprotected,
        )

    def get_state(self) -> State:
        """Get the current write-protected state snapshot."""
        return self._state

    def dispatch(self, transition: Transition, payload: Payload = None) -> None:
        """Run one guarded transition against the root state.

        Listeners are only notified when the transition returns a different
        object than the current state. The guard is released on every exit
        path, including transition and listener errors.

        Args:
            transition: Function (state, payload) -> next state.
            payload: Value passed to the transition.

        Raises:
            ReentrantDispatchError: If called while another dispatch is running
                (e.g. from a transition or a listener). State is left unchanged.
        """
        if self._phase is DispatchPhase.DISPATCHING:
            raise ReentrantDispatchError(
                f"Cannot dispatch {transition_name(transition)!r}: "
                f"another action is still being dispatched on this store"
            )

        self._phase = DispatchPhase.DISPATCHING
        try:
            _logger.debug("Dispatching %s", transition_name(transition))
            next_state = transition(self._state, payload)
            if next_state is self._state:
                _logger.debug("State unchanged by %s; skipping listeners", transition_name(transition))
                return

            self._state = self._freeze(next_state)
            listeners = self._listeners.snapshot()
            _logger.debug("Notifying %d listeners", len(listeners))
            for listener in listeners:
                listener(self._state)
        finally:
            self._phase = DispatchPhase.IDLE

    def subscribe(self, listener: Listener) -> Subscription:
        """Register a listener called with every new state.

        Args:
            listener: Callable receiving the new state after each change.

        Returns:
            Unsubscribe handle. Calling it more than once is a no-op.
        """
        return self._listeners.add(listener)

    def create_action(self, transition: Any, *, name: str | None = None) -> Action:
        """Bind a transition over the whole root state to this store.

        Args:
            transition: Function (state, payload) -> state, or state -> state.
            name: Display name for logs. Defaults to the function name.

        Returns:
            Callable action; invoking it dispatches the transition.
        """
        return Action(
            store=self,
            transition=adapt_transition(transition),
            name=transition_name(transition, name),
        )

    def create_register(self, scope: ScopeKey, initial_value: Any = None) -> Register:
        """Create a register over one slice of the root state.

        The initial value is merged into the root state immediately, without
        the dispatch guard and without notifying listeners.

        Args:
            scope: Key of the slice in the root state mapping.
            initial_value: Initial slice value.

        Returns:
            Register scoped to state[scope].
        """
        if self.is_dispatching:
            warnings.warn(
                f"create_register({scope!r}) called during a dispatch. "
                f"The in-flight transition result will replace the merged initial value.",
                RuntimeWarning,
                stacklevel=2,
            )
        self._state = set_scope(self._state, scope, initial_value)
        _logger.debug("Created register %r", scope)
        return Register(scope=scope, parent=self)


def create_store(initial_value: State = None, *, settings: StoreSettings | None = None) -> Store:
    """Create an independent store.

    Args:
        initial_value: Initial root state. Published write-protected.
        settings: Snapshot publishing options. Loaded from BOOKIE_* env vars if omitted.

    Returns:
        New Store in the idle phase with no listeners.
    """
    return Store(initial_value, settings=settings)
