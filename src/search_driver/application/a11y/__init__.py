"""Application a11y – screen-reader notification messages."""
from search_driver.application.a11y.messages import (
    DEFAULT_A11Y_MESSAGES,
    A11yMessage,
    merge_messages,
    more_filters,
    search_results,
)

__all__ = [
    "A11yMessage",
    "DEFAULT_A11Y_MESSAGES",
    "merge_messages",
    "more_filters",
    "search_results",
]
