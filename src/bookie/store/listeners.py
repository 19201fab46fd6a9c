"""Listener registry with identity-based unsubscribe handles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bookie.core.types import Listener

_logger = logging.getLogger(__name__)


@dataclass(eq=False, slots=True)
class Subscription:
    """Unsubscribe handle returned by Store.subscribe().

    Calling it removes exactly this subscription. Subsequent calls are no-ops.
    Two subscriptions of the same function are independent.
    """

    listener: Listener
    _registry: ListenerRegistry = field(repr=False)
    active: bool = True

    def __call__(self) -> None:
        if not self.active:
            return
        self.active = False
        self._registry.remove(self)


class ListenerRegistry:
    """Ordered collection of subscriptions owned by one store.

    Removal searches the current collection by handle identity, so it stays
    correct regardless of subscriptions added or removed in between.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def add(self, listener: Listener) -> Subscription:
        """Append listener and return its unsubscribe handle.

        Args:
            listener: Callable receiving each new state.

        Returns:
            Handle that removes this subscription when called.
        """
        subscription = Subscription(listener, self)
        self._subscriptions.append(subscription)
        _logger.debug("Subscribed %r (%d listeners)", listener, len(self._subscriptions))
        return subscription

    def remove(self, subscription: Subscription) -> bool:
        """Remove a subscription by identity.

        Args:
            subscription: Handle previously returned by add().

        Returns:
            True if it was registered, False otherwise.
        """
        for index, candidate in enumerate(self._subscriptions):
            if candidate is subscription:
                del self._subscriptions[index]
                _logger.debug(
                    "Unsubscribed %r (%d listeners)", subscription.listener, len(self._subscriptions)
                )
                return True
        return False

    def snapshot(self) -> tuple[Listener, ...]:
        """Listeners to notify for one pass, in subscription order."""
        return tuple(s.listener for s in self._subscriptions)

    def __len__(self) -> int:
        return len(self._subscriptions)
