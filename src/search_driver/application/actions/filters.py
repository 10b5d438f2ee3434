"""Application actions – filter list transformations.

Each function takes the current filters and returns a new tuple; the input
is never modified.  Filters are matched on ``(field, type)``.
"""
from __future__ import annotations

from typing import Any, Iterable

from search_driver.application.state import Filter, FilterType

__all__ = ["add_filter", "clear_filters", "remove_filter", "set_filter"]


def add_filter(
    filters: tuple[Filter, ...],
    name: str,
    value: Any,
    type: FilterType = "all",  # noqa: A002
) -> tuple[Filter, ...]:
    """Add *value* to the ``(name, type)`` filter, creating it when missing."""
    existing = next((f for f in filters if f.field == name and f.type == type), None)
    if existing is None:
        return filters + (Filter(name, (value,), type),)
    if value in existing.values:
        return filters
    return tuple(
        f.with_values(f.values + (value,)) if f is existing else f
        for f in filters
    )


def remove_filter(
    filters: tuple[Filter, ...],
    name: str,
    value: Any = None,
    type: FilterType | None = None,  # noqa: A002
) -> tuple[Filter, ...]:
    """Remove *value* from filters on *name*, or the whole filter when *value* is ``None``.

    Filters left without values are dropped.  *type* narrows the match.
    """
    kept: list[Filter] = []
    for f in filters:
        if f.field != name or (type is not None and f.type != type):
            kept.append(f)
            continue
        if value is None:
            continue
        remaining = tuple(v for v in f.values if v != value)
        if remaining:
            kept.append(f.with_values(remaining))
    return tuple(kept)


def set_filter(
    filters: tuple[Filter, ...],
    name: str,
    value: Any,
    type: FilterType = "all",  # noqa: A002
) -> tuple[Filter, ...]:
    """Replace the ``(name, type)`` filter with one holding only *value*."""
    kept = tuple(f for f in filters if not (f.field == name and f.type == type))
    return kept + (Filter(name, (value,), type),)


def clear_filters(filters: tuple[Filter, ...], except_: Iterable[str] = ()) -> tuple[Filter, ...]:
    keep = set(except_)
    return tuple(f for f in filters if f.field in keep)
