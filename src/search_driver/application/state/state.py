"""Application state – SearchState and Filter value objects.

``SearchState`` is replaced wholesale on every commit: a new instance is the
previous one merged with a patch (a mapping of field name to new value).
"""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Literal, Mapping

from search_driver.kernel.errors import InvariantViolationError, ValidationError

FilterType = Literal["all", "any", "none"]
FILTER_TYPES: frozenset[str] = frozenset({"all", "any", "none"})

#: Fields describing the request (as opposed to the response); these travel in the URL.
REQUEST_FIELDS: tuple[str, ...] = (
    "search_term",
    "current",
    "results_per_page",
    "sort_field",
    "sort_direction",
    "filters",
)

__all__ = [
    "DEFAULT_STATE",
    "FILTER_TYPES",
    "Filter",
    "FilterType",
    "REQUEST_FIELDS",
    "SearchState",
    "normalize_patch",
]


@dataclasses.dataclass(frozen=True)
class Filter:
    """Values selected for one field, combined with ``type`` semantics."""

    field: str
    values: tuple[Any, ...] = ()
    type: FilterType = "all"

    def __post_init__(self) -> None:
        if self.type not in FILTER_TYPES:
            raise ValidationError(
                f"Unknown filter type {self.type!r}",
                errors=[{"field": "type", "value": self.type, "allowed": sorted(FILTER_TYPES)}],
            )
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def of(cls, value: "Filter | Mapping[str, Any]") -> "Filter":
        """Coerce a ``{field, values, type}`` mapping into a :class:`Filter`."""
        if isinstance(value, Filter):
            return value
        try:
            return cls(
                field=value["field"],
                values=tuple(value.get("values", ())),
                type=value.get("type", "all"),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValidationError(f"Malformed filter {value!r}", cause=exc) from exc

    def with_values(self, values: Iterable[Any]) -> "Filter":
        return dataclasses.replace(self, values=tuple(values))


@dataclasses.dataclass(frozen=True)
class SearchState:
    """Canonical search state.

    ``paging_start`` / ``paging_end`` are 1-based inclusive bounds of the
    current result window and are both 0 when ``total_results`` is 0.
    ``facets`` is always a mapping.
    """

    # request state
    search_term: str = ""
    results_per_page: int = 20
    current: int = 1
    filters: tuple[Filter, ...] = ()
    sort_field: str = ""
    sort_direction: str = ""

    # response state
    results: tuple[Any, ...] = ()
    total_results: int = 0
    total_pages: int = 0
    facets: dict[str, Any] = dataclasses.field(default_factory=dict)
    request_id: str = ""
    paging_start: int = 0
    paging_end: int = 0
    result_search_term: str = ""
    raw_response: dict[str, Any] = dataclasses.field(default_factory=dict)
    was_searched: bool = False

    # autocomplete state
    autocompleted_results: tuple[Any, ...] = ()
    autocompleted_results_request_id: str = ""
    autocompleted_suggestions: dict[str, Any] = dataclasses.field(default_factory=dict)
    autocompleted_suggestions_request_id: str = ""

    # lifecycle
    is_loading: bool = False
    error: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.current, int) or self.current < 1:
            raise InvariantViolationError(f"current must be a positive integer, got {self.current!r}")
        if not isinstance(self.results_per_page, int) or self.results_per_page < 1:
            raise InvariantViolationError(
                f"results_per_page must be a positive integer, got {self.results_per_page!r}"
            )
        if self.facets is None:
            object.__setattr__(self, "facets", {})

    def merge(self, patch: Mapping[str, Any]) -> "SearchState":
        """Return a new state: ``self`` with the fields in *patch* replaced."""
        unknown = set(patch) - _FIELD_NAMES
        if unknown:
            raise InvariantViolationError(
                f"Unknown state field(s): {', '.join(sorted(unknown))}",
                detail={"fields": sorted(unknown)},
            )
        return dataclasses.replace(self, **normalize_patch(patch))

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in dataclasses.fields(SearchState))

_TUPLE_FIELDS = ("results", "autocompleted_results")
_MAPPING_FIELDS = ("facets", "raw_response", "autocompleted_suggestions")


def normalize_patch(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce patch values into the shapes ``SearchState`` stores."""
    out = dict(patch)
    if "filters" in out:
        out["filters"] = tuple(Filter.of(f) for f in (out["filters"] or ()))
    for name in _TUPLE_FIELDS:
        if name in out:
            out[name] = tuple(out[name] or ())
    for name in _MAPPING_FIELDS:
        if name in out:
            out[name] = dict(out[name] or {})
    return out


DEFAULT_STATE = SearchState()
