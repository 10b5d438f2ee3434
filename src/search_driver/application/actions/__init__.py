"""Application actions – pure patch computations behind the driver's actions."""
from search_driver.application.actions.debounce import DebounceManager
from search_driver.application.actions.filters import add_filter, clear_filters, remove_filter, set_filter
from search_driver.application.actions.validation import require_positive_int

ACTION_NAMES: tuple[str, ...] = (
    "add_filter",
    "remove_filter",
    "set_filter",
    "clear_filters",
    "reset",
    "set_results_per_page",
    "set_search_term",
    "set_sort",
    "set_current",
    "track_click_through",
    "track_autocomplete_click_through",
    "a11y_notify",
)

__all__ = [
    "ACTION_NAMES",
    "DebounceManager",
    "add_filter",
    "clear_filters",
    "remove_filter",
    "require_positive_int",
    "set_filter",
]
