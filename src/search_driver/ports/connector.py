"""APIConnector port – the search backend the driver talks to."""

from __future__ import annotations

from typing import Any, Awaitable, Mapping, Protocol, runtime_checkable

from search_driver.application.query import AutocompleteQueryDescriptor, SearchQueryDescriptor
from search_driver.application.response import AutocompleteResponse, SearchResponse
from search_driver.application.state import SearchState


@runtime_checkable
class APIConnector(Protocol):
    """Port: backend adapter performing queries and click tracking.

    ``on_search`` / ``on_autocomplete`` are normally coroutines; a plain
    return value is accepted too.  Responses may be the envelope dataclasses
    or mappings with the same keys.

    Example::

        class MyConnector:
            async def on_search(self, state, query):
                return {"results": [...], "total_results": 1, "total_pages": 1}
    """

    def on_search(
        self,
        state: SearchState,
        query: SearchQueryDescriptor,
    ) -> Awaitable[SearchResponse | Mapping[str, Any]] | SearchResponse | Mapping[str, Any]:
        """Run a search for *state* shaped by *query*."""
        ...

    def on_autocomplete(
        self,
        state: SearchState,
        query: AutocompleteQueryDescriptor,
    ) -> Awaitable[AutocompleteResponse | Mapping[str, Any]] | AutocompleteResponse | Mapping[str, Any]:
        """Fetch autocomplete results and/or suggestions."""
        ...

    def on_result_click(self, payload: Mapping[str, Any]) -> Any:
        """Record a click on a search result (fire and forget)."""
        ...

    def on_autocomplete_result_click(self, payload: Mapping[str, Any]) -> Any:
        """Record a click on an autocomplete result (fire and forget)."""
        ...


__all__ = ["APIConnector"]
