"""Application a11y – default message renderers and per-key merging."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

#: A message renderer: keyword arguments in, display string out.
A11yMessage = Callable[..., str]

__all__ = ["A11yMessage", "DEFAULT_A11Y_MESSAGES", "merge_messages", "more_filters", "search_results"]


def search_results(
    start: int = 0,
    end: int = 0,
    total_results: int = 0,
    search_term: str = "",
    **_: Any,
) -> str:
    message = f"Showing {start} to {end} results out of {total_results}"
    if search_term:
        message += f', searching for "{search_term}".'
    return message


def more_filters(visible_options_count: int = 0, showing_all: bool = False, **_: Any) -> str:
    message = "All " if showing_all else ""
    message += f"{visible_options_count} options shown."
    return message


DEFAULT_A11Y_MESSAGES: Mapping[str, A11yMessage] = MappingProxyType(
    {
        "search_results": search_results,
        "more_filters": more_filters,
    }
)


def merge_messages(custom: Mapping[str, A11yMessage] | None = None) -> dict[str, A11yMessage]:
    """Defaults overridden key by key; custom keys are added."""
    merged = dict(DEFAULT_A11Y_MESSAGES)
    for name, renderer in (custom or {}).items():
        merged[name] = renderer
    return merged
