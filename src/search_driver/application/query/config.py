"""Application query – SearchQueryConfig and AutocompleteQueryConfig.

Both are read-only for the lifetime of a driver.  Plain mappings with the
same keys are accepted by the ``of`` constructors.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Mapping, Sequence

from search_driver.application.state import Filter
from search_driver.config.validation import ConfigError

#: Predicate deciding, from the filters about to be sent, whether a facet is requested.
FacetPredicate = Callable[[tuple[Filter, ...]], bool]

__all__ = [
    "AutocompleteQueryConfig",
    "AutocompleteResultsConfig",
    "FacetPredicate",
    "SearchQueryConfig",
]


def _from_mapping(cls: type, value: Any) -> Any:
    if value is None:
        return cls()
    if isinstance(value, cls):
        return value
    if not isinstance(value, Mapping):
        raise ConfigError(f"{cls.__name__} expects a mapping, got {type(value).__name__}")
    names = {f.name for f in dataclasses.fields(cls)}
    unknown = set(value) - names
    if unknown:
        raise ConfigError(
            f"Unknown {cls.__name__} key(s): {', '.join(sorted(unknown))}",
            detail={"keys": sorted(unknown)},
        )
    return cls(**value)


@dataclasses.dataclass(frozen=True)
class SearchQueryConfig:
    facets: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    conditional_facets: Mapping[str, FacetPredicate] = dataclasses.field(default_factory=dict)
    disjunctive_facets: Sequence[str] | None = None
    disjunctive_facets_analytics_tags: Sequence[str] | None = None
    result_fields: Mapping[str, Any] | None = None
    search_fields: Mapping[str, Any] | None = None

    @classmethod
    def of(cls, value: "SearchQueryConfig | Mapping[str, Any] | None") -> "SearchQueryConfig":
        return _from_mapping(cls, value)


@dataclasses.dataclass(frozen=True)
class AutocompleteResultsConfig:
    result_fields: Mapping[str, Any] | None = None
    search_fields: Mapping[str, Any] | None = None
    results_per_page: int | None = None

    @classmethod
    def of(cls, value: "AutocompleteResultsConfig | Mapping[str, Any] | None") -> "AutocompleteResultsConfig":
        return _from_mapping(cls, value)


@dataclasses.dataclass(frozen=True)
class AutocompleteQueryConfig:
    """Independent of :class:`SearchQueryConfig`; never inherits its facets."""

    results: AutocompleteResultsConfig | None = None
    suggestions: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.results is not None and not isinstance(self.results, AutocompleteResultsConfig):
            object.__setattr__(self, "results", AutocompleteResultsConfig.of(self.results))

    @classmethod
    def of(cls, value: "AutocompleteQueryConfig | Mapping[str, Any] | None") -> "AutocompleteQueryConfig":
        return _from_mapping(cls, value)
