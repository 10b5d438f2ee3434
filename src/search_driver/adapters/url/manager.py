"""URL adapter – QueryStringURLManager and InMemoryLocation."""
from __future__ import annotations

from typing import Any, Callable

from search_driver.adapters.url.codec import parse_query_string, to_query_string
from search_driver.application.state import SearchState
from search_driver.observability.logging import get_logger
from search_driver.ports import URLChangeCallback

__all__ = ["InMemoryLocation", "QueryStringURLManager"]

_log = get_logger(__name__)

LocationListener = Callable[[str], None]


class InMemoryLocation:
    """Location holding a query string plus its entry history.

    ``push`` / ``replace`` are driver-initiated and notify nobody;
    ``navigate`` simulates an external change and notifies listeners.
    """

    def __init__(self, search: str = "") -> None:
        self.search = search
        self.entries: list[str] = [search]
        self._listeners: list[LocationListener] = []

    def listen(self, listener: LocationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unlisten() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unlisten

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def push(self, search: str) -> None:
        self.search = search
        self.entries.append(search)

    def replace(self, search: str) -> None:
        self.search = search
        self.entries[-1] = search

    def navigate(self, search: str) -> None:
        self.push(search)
        for listener in list(self._listeners):
            listener(search)


class QueryStringURLManager:
    """URL collaborator storing the URL-tracked state in a location's query string.

    Usable directly as a ``url_sync_factory``::

        SearchDriver(connector, url_sync_factory=QueryStringURLManager)
    """

    def __init__(self, on_change: URLChangeCallback, location: InMemoryLocation | None = None) -> None:
        self.location = location if location is not None else InMemoryLocation()
        self._on_change = on_change
        self._unlisten: Callable[[], None] | None = self.location.listen(self._handle_change)

    def get_state_from_url(self) -> dict[str, Any]:
        return parse_query_string(self.location.search)

    def push_state_to_url(self, state: SearchState, *, replace_url: bool = False) -> None:
        search = to_query_string(state)
        if search == self.location.search:
            return
        if replace_url:
            self.location.replace(search)
        else:
            self.location.push(search)
        _log.debug("url.pushed", search=search, replace_url=replace_url)

    def tear_down(self) -> None:
        if self._unlisten is not None:
            self._unlisten()
            self._unlisten = None

    def _handle_change(self, search: str) -> None:
        self._on_change(parse_query_string(search))
