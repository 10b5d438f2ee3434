"""Application query – static query configuration and the QueryBuilder."""
from search_driver.application.query.builder import QueryBuilder, select_facets
from search_driver.application.query.config import (
    AutocompleteQueryConfig,
    AutocompleteResultsConfig,
    FacetPredicate,
    SearchQueryConfig,
)
from search_driver.application.query.descriptor import AutocompleteQueryDescriptor, SearchQueryDescriptor

__all__ = [
    "AutocompleteQueryConfig",
    "AutocompleteQueryDescriptor",
    "AutocompleteResultsConfig",
    "FacetPredicate",
    "QueryBuilder",
    "SearchQueryConfig",
    "SearchQueryDescriptor",
    "select_facets",
]
