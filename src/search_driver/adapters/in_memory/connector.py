"""In-memory adapter – InMemoryAPIConnector.

Searches a list of dict-like documents: case-insensitive substring match on
the search term, ``all`` / ``any`` / ``none`` filters, value facets (with
disjunctive counting), sorting and paging.  Facets come back in the shape
``{name: [{"field", "type", "data": [{"value", "count"}]}]}``.
"""
from __future__ import annotations

import uuid
from collections import Counter
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from search_driver.application.query import AutocompleteQueryDescriptor, SearchQueryDescriptor
from search_driver.application.response import total_pages
from search_driver.application.state import Filter, SearchState

T = TypeVar("T")

__all__ = ["InMemoryAPIConnector"]


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _value_matches(doc_value: Any, wanted: Any) -> bool:
    if isinstance(wanted, Mapping) and ("from" in wanted or "to" in wanted):
        low, high = wanted.get("from"), wanted.get("to")
        return any(
            v is not None
            and (low is None or v >= low)
            and (high is None or v < high)
            for v in _as_list(doc_value)
        )
    return wanted in _as_list(doc_value)


class InMemoryAPIConnector(Generic[T]):
    """Reference connector backed by a Python list."""

    def __init__(self, items: list[T], key_fn: Callable[[T], dict[str, Any]] | None = None) -> None:
        self._items = items
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or (lambda x: x if isinstance(x, dict) else x.__dict__)
        self.clicks: list[dict[str, Any]] = []
        self.autocomplete_clicks: list[dict[str, Any]] = []

    def _matches_filter(self, item_dict: dict[str, Any], f: Filter) -> bool:
        val = item_dict.get(f.field)
        hits = [_value_matches(val, wanted) for wanted in f.values]
        match f.type:
            case "all":  return all(hits)
            case "any":  return any(hits) or not hits
            case "none": return not any(hits)
            case _:      return True

    def _matches_term(self, item_dict: dict[str, Any], term: str, fields: Iterable[str] | None) -> bool:
        if not term:
            return True
        values = item_dict.values() if fields is None else (item_dict.get(f) for f in fields)
        return any(term.lower() in str(v).lower() for v in values if v is not None)

    def _candidates(self, term: str, search_fields: Mapping[str, Any] | None) -> list[dict[str, Any]]:
        fields = list(search_fields) if search_fields else None
        return [d for d in map(self._key_fn, self._items) if self._matches_term(d, term, fields)]

    def _facet_counts(
        self,
        docs: list[dict[str, Any]],
        filters: tuple[Filter, ...],
        query: SearchQueryDescriptor,
    ) -> dict[str, Any]:
        disjunctive = set(query.disjunctive_facets or ())
        facets: dict[str, Any] = {}
        for name in query.facets:
            # a disjunctive facet ignores filters on its own field
            active = [f for f in filters if not (name in disjunctive and f.field == name)]
            counts: Counter[Any] = Counter()
            for d in docs:
                if all(self._matches_filter(d, f) for f in active):
                    counts.update(v for v in _as_list(d.get(name)) if v is not None)
            facets[name] = [
                {
                    "field": name,
                    "type": "value",
                    "data": [{"value": v, "count": c} for v, c in counts.most_common()],
                }
            ]
        return facets

    @staticmethod
    def _project(d: dict[str, Any], result_fields: Mapping[str, Any] | None) -> dict[str, Any]:
        if not result_fields:
            return d
        return {k: v for k, v in d.items() if k in result_fields}

    async def on_search(self, state: SearchState, query: SearchQueryDescriptor) -> dict[str, Any]:
        docs = self._candidates(query.search_term, query.search_fields)
        results = [d for d in docs if all(self._matches_filter(d, f) for f in query.filters)]

        if query.sort_field:
            results.sort(
                key=lambda x: x.get(query.sort_field) or "",
                reverse=(query.sort_direction == "desc"),
            )

        total = len(results)
        start = (query.current - 1) * query.results_per_page
        page_items = results[start: start + query.results_per_page]
        return {
            "results": [self._project(d, query.result_fields) for d in page_items],
            "total_results": total,
            "total_pages": total_pages(total, query.results_per_page),
            "request_id": uuid.uuid4().hex,
            "facets": self._facet_counts(docs, query.filters, query),
        }

    async def on_autocomplete(self, state: SearchState, query: AutocompleteQueryDescriptor) -> dict[str, Any]:
        response: dict[str, Any] = {}
        if query.results is not None:
            size = query.results.results_per_page or 5
            docs = self._candidates(query.search_term, query.results.search_fields)[:size]
            response["autocompleted_results"] = [self._project(d, query.results.result_fields) for d in docs]
            response["autocompleted_results_request_id"] = uuid.uuid4().hex
        if query.suggestions is not None:
            response["autocompleted_suggestions"] = {
                "documents": [{"suggestion": s} for s in self.suggest(query.search_term, query.suggestions)]
            }
            response["autocompleted_suggestions_request_id"] = uuid.uuid4().hex
        return response

    def suggest(self, prefix: str, config: Mapping[str, Any]) -> list[str]:
        fields = config.get("fields") or ["title"]
        size = config.get("size", 5)
        seen: set[str] = set()
        out: list[str] = []
        for item in self._items:
            d = self._key_fn(item)
            for field in fields:
                val = str(d.get(field, ""))
                if val.lower().startswith(prefix.lower()) and val not in seen:
                    seen.add(val)
                    out.append(val)
        return out[:size]

    def on_result_click(self, payload: Mapping[str, Any]) -> None:
        self.clicks.append(dict(payload))

    def on_autocomplete_result_click(self, payload: Mapping[str, Any]) -> None:
        self.autocomplete_clicks.append(dict(payload))
