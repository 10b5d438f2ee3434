"""Application subscriptions – SubscriptionHub."""
from __future__ import annotations

from typing import Callable

from search_driver.application.state import SearchState

#: Type alias for a state-change callback.
StateSubscriber = Callable[[SearchState], object]

__all__ = ["StateSubscriber", "SubscriptionHub"]


class SubscriptionHub:
    """Ordered registry of state subscribers, unique by equality.

    Subscribers are notified in registration order.  Exceptions raised by a
    subscriber propagate to whoever triggered the commit; later subscribers
    are not called for that commit.  Bound methods compare equal when they
    wrap the same function on the same instance, so ``hub.unsubscribe(w.render)``
    removes an earlier ``hub.subscribe(w.render)``.

    Example::

        hub = SubscriptionHub()
        hub.subscribe(render)
        hub.notify(state)
        hub.unsubscribe(render)
    """

    def __init__(self) -> None:
        self._subscribers: list[StateSubscriber] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, fn: object) -> bool:
        return any(s == fn for s in self._subscribers)

    def subscribe(self, fn: StateSubscriber) -> None:
        if fn not in self:
            self._subscribers.append(fn)

    def unsubscribe(self, fn: StateSubscriber) -> None:
        self._subscribers = [s for s in self._subscribers if s != fn]

    def clear(self) -> None:
        self._subscribers.clear()

    def notify(self, state: SearchState) -> None:
        # iterate a copy: callbacks may (un)subscribe while being notified
        for fn in list(self._subscribers):
            fn(state)
