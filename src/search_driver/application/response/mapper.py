"""Application response – ResponseMapper."""
from __future__ import annotations

from typing import Any, Mapping

from search_driver.application.response.envelope import AutocompleteResponse, SearchResponse
from search_driver.application.response.pagination import paging_window
from search_driver.application.state import SearchState

__all__ = ["ResponseMapper"]


class ResponseMapper:
    """Turns backend responses into state patches.

    Paging bounds are computed from the state the query was issued with,
    not from whatever is committed when the response lands.
    """

    def map_search(
        self,
        response: SearchResponse | Mapping[str, Any],
        request_state: SearchState,
    ) -> dict[str, Any]:
        response = SearchResponse.of(response)
        window = paging_window(
            request_state.current,
            request_state.results_per_page,
            response.total_results,
        )
        return {
            "results": response.results,
            "total_results": response.total_results,
            "total_pages": response.total_pages,
            "request_id": response.request_id,
            "facets": dict(response.facets or {}),
            "raw_response": dict(response.extra),
            "paging_start": window.start,
            "paging_end": window.end,
            "result_search_term": request_state.search_term,
            "was_searched": True,
            "is_loading": False,
            "error": "",
        }

    def map_autocomplete(self, response: AutocompleteResponse | Mapping[str, Any] | None) -> dict[str, Any]:
        response = AutocompleteResponse.of(response)
        patch: dict[str, Any] = {}
        if response.autocompleted_results is not None:
            patch["autocompleted_results"] = response.autocompleted_results
            patch["autocompleted_results_request_id"] = response.autocompleted_results_request_id
        if response.autocompleted_suggestions is not None:
            patch["autocompleted_suggestions"] = dict(response.autocompleted_suggestions)
            patch["autocompleted_suggestions_request_id"] = response.autocompleted_suggestions_request_id
        return patch
