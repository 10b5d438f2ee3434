"""Application query – QueryBuilder.

Turns the current state plus static configuration into query descriptors.
Conditional facets are evaluated against the filters of the state being
issued, every time a query is built.
"""
from __future__ import annotations

from typing import Any, Mapping

from search_driver.application.query.config import (
    AutocompleteQueryConfig,
    AutocompleteResultsConfig,
    FacetPredicate,
    SearchQueryConfig,
)
from search_driver.application.query.descriptor import AutocompleteQueryDescriptor, SearchQueryDescriptor
from search_driver.application.state import Filter, SearchState

__all__ = ["QueryBuilder", "select_facets"]


def select_facets(
    facets: Mapping[str, Any],
    conditional_facets: Mapping[str, FacetPredicate],
    filters: tuple[Filter, ...],
) -> dict[str, Any]:
    """Return the facet definitions to request for *filters*.

    A facet with no registered predicate is always kept.  Predicates whose
    facet is not defined are ignored.
    """
    selected: dict[str, Any] = {}
    for name, definition in facets.items():
        predicate = conditional_facets.get(name)
        if predicate is None or predicate(filters):
            selected[name] = definition
    return selected


class QueryBuilder:
    def __init__(
        self,
        search_query: SearchQueryConfig | Mapping[str, Any] | None = None,
        autocomplete_query: AutocompleteQueryConfig | Mapping[str, Any] | None = None,
    ) -> None:
        self.search_query = SearchQueryConfig.of(search_query)
        self.autocomplete_query = AutocompleteQueryConfig.of(autocomplete_query)

    def build_search(self, state: SearchState) -> SearchQueryDescriptor:
        config = self.search_query
        return SearchQueryDescriptor(
            search_term=state.search_term,
            filters=state.filters,
            current=state.current,
            results_per_page=state.results_per_page,
            sort_field=state.sort_field,
            sort_direction=state.sort_direction,
            facets=select_facets(config.facets, config.conditional_facets, state.filters),
            disjunctive_facets=config.disjunctive_facets,
            disjunctive_facets_analytics_tags=config.disjunctive_facets_analytics_tags,
            result_fields=config.result_fields,
            search_fields=config.search_fields,
        )

    def build_autocomplete(
        self,
        search_term: str,
        *,
        results: bool = False,
        suggestions: bool = False,
    ) -> AutocompleteQueryDescriptor:
        config = self.autocomplete_query
        return AutocompleteQueryDescriptor(
            search_term=search_term,
            results=(config.results or AutocompleteResultsConfig()) if results else None,
            suggestions=(config.suggestions or {}) if suggestions else None,
        )
