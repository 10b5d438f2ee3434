"""Application state – SearchState value object and the StateStore."""
from search_driver.application.state.state import (
    DEFAULT_STATE,
    FILTER_TYPES,
    Filter,
    FilterType,
    REQUEST_FIELDS,
    SearchState,
    normalize_patch,
)
from search_driver.application.state.store import StateStore

__all__ = [
    "DEFAULT_STATE",
    "FILTER_TYPES",
    "Filter",
    "FilterType",
    "REQUEST_FIELDS",
    "SearchState",
    "StateStore",
    "normalize_patch",
]
