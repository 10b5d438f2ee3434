"""Application response – SearchResponse and AutocompleteResponse envelopes.

The backend envelope is extensible: keys beyond the known ones are kept in
``extra`` and end up in ``SearchState.raw_response``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from search_driver.kernel.errors import ExternalServiceError

__all__ = ["AutocompleteResponse", "SearchResponse"]


def _split(value: Mapping[str, Any], known: frozenset[str]) -> tuple[dict[str, Any], dict[str, Any]]:
    fields = {k: v for k, v in value.items() if k in known}
    extra = {k: v for k, v in value.items() if k not in known}
    return fields, extra


@dataclasses.dataclass(frozen=True)
class SearchResponse:
    results: tuple[Any, ...] = ()
    total_results: int = 0
    total_pages: int = 0
    request_id: str = ""
    facets: Mapping[str, Any] | None = None
    extra: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def of(cls, value: "SearchResponse | Mapping[str, Any]") -> "SearchResponse":
        if isinstance(value, SearchResponse):
            return value
        if not isinstance(value, Mapping):
            raise ExternalServiceError(
                "api_connector",
                f"on_search returned {type(value).__name__}, expected a mapping",
                operation="on_search",
            )
        fields, extra = _split(value, _SEARCH_FIELDS)
        fields["results"] = tuple(fields.get("results") or ())
        return cls(**fields, extra=extra)


@dataclasses.dataclass(frozen=True)
class AutocompleteResponse:
    autocompleted_results: tuple[Any, ...] | None = None
    autocompleted_results_request_id: str = ""
    autocompleted_suggestions: Mapping[str, Any] | None = None
    autocompleted_suggestions_request_id: str = ""

    @classmethod
    def of(cls, value: "AutocompleteResponse | Mapping[str, Any] | None") -> "AutocompleteResponse":
        if value is None:
            return cls()
        if isinstance(value, AutocompleteResponse):
            return value
        if not isinstance(value, Mapping):
            raise ExternalServiceError(
                "api_connector",
                f"on_autocomplete returned {type(value).__name__}, expected a mapping",
                operation="on_autocomplete",
            )
        fields, _ = _split(value, _AUTOCOMPLETE_FIELDS)
        if fields.get("autocompleted_results") is not None:
            fields["autocompleted_results"] = tuple(fields["autocompleted_results"])
        return cls(**fields)


_SEARCH_FIELDS = frozenset(
    f.name for f in dataclasses.fields(SearchResponse) if f.name != "extra"
)
_AUTOCOMPLETE_FIELDS = frozenset(f.name for f in dataclasses.fields(AutocompleteResponse))
