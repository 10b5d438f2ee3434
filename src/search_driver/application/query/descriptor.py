"""Application query – backend-agnostic query descriptors handed to the connector."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence

from search_driver.application.query.config import AutocompleteResultsConfig
from search_driver.application.state import Filter

__all__ = ["AutocompleteQueryDescriptor", "SearchQueryDescriptor"]


@dataclasses.dataclass(frozen=True)
class SearchQueryDescriptor:
    search_term: str
    filters: tuple[Filter, ...]
    current: int
    results_per_page: int
    sort_field: str = ""
    sort_direction: str = ""
    facets: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    disjunctive_facets: Sequence[str] | None = None
    disjunctive_facets_analytics_tags: Sequence[str] | None = None
    result_fields: Mapping[str, Any] | None = None
    search_fields: Mapping[str, Any] | None = None


@dataclasses.dataclass(frozen=True)
class AutocompleteQueryDescriptor:
    """``results`` / ``suggestions`` are ``None`` when that part was not requested."""

    search_term: str
    results: AutocompleteResultsConfig | None = None
    suggestions: Mapping[str, Any] | None = None
