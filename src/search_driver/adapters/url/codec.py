"""URL adapter – query-string codec.

Only the request part of the state travels in the URL::

    q=shoes&current=n_2_n&size=n_20_n&sort-field=price&sort-direction=asc
    &filters[0][field]=brand&filters[0][values][0]=Nike&filters[0][type]=any

Non-string scalars are wrapped so they survive the round trip: numbers as
``n_<v>_n``, booleans as ``b_<v>_b``, anything else as JSON in ``j_<v>_j``.
Strings that would read back as a wrapped value are JSON-wrapped too.
"""
from __future__ import annotations

import json
import re
from typing import Any
from urllib.parse import parse_qsl, urlencode

from search_driver.application.state import FILTER_TYPES, REQUEST_FIELDS, SearchState
from search_driver.observability.logging import get_logger

__all__ = ["URL_TRACKED_FIELDS", "parse_query_string", "to_query_string"]

URL_TRACKED_FIELDS: tuple[str, ...] = REQUEST_FIELDS

_SCALAR_KEYS = {
    "q": "search_term",
    "current": "current",
    "size": "results_per_page",
    "sort-field": "sort_field",
    "sort-direction": "sort_direction",
}
_FILTER_KEY = re.compile(r"^filters\[(\d+)\]\[(field|type|values)\](?:\[(\d+)\])?$")
_WRAPPED = re.compile(r"^([nbj])_(.*)_\1$", re.DOTALL)

_log = get_logger(__name__)


def _encode_value(value: Any) -> str:
    if isinstance(value, str) and _WRAPPED.match(value) is None:
        return value
    if isinstance(value, bool):
        return f"b_{str(value).lower()}_b"
    if isinstance(value, (int, float)):
        return f"n_{value}_n"
    return f"j_{json.dumps(value, sort_keys=True, separators=(',', ':'))}_j"


def _decode_value(raw: str) -> Any:
    match = _WRAPPED.match(raw)
    if match is None:
        return raw
    kind, body = match.groups()
    if kind == "b":
        return body == "true"
    if kind == "n":
        number = float(body)
        return int(number) if number.is_integer() and "." not in body else number
    return json.loads(body)


def to_query_string(state: SearchState) -> str:
    pairs: list[tuple[str, str]] = []
    if state.search_term:
        pairs.append(("q", _encode_value(state.search_term)))
    pairs.append(("current", _encode_value(state.current)))
    pairs.append(("size", _encode_value(state.results_per_page)))
    if state.sort_field:
        pairs.append(("sort-field", _encode_value(state.sort_field)))
    if state.sort_direction:
        pairs.append(("sort-direction", _encode_value(state.sort_direction)))
    for i, f in enumerate(state.filters):
        pairs.append((f"filters[{i}][field]", _encode_value(f.field)))
        for j, value in enumerate(f.values):
            pairs.append((f"filters[{i}][values][{j}]", _encode_value(value)))
        pairs.append((f"filters[{i}][type]", f.type))
    return urlencode(pairs)


def parse_query_string(query_string: str) -> dict[str, Any]:
    """Decode *query_string* into a state patch; malformed entries are skipped.

    An entry is malformed when its value cannot be decoded, when it decodes to
    the wrong kind (``q=n_5_n`` is a number, not a search term), or, for
    filters, when the field is not a string or the type is not one of
    :data:`~search_driver.application.state.FILTER_TYPES`.
    """
    patch: dict[str, Any] = {}
    filters: dict[int, dict[str, Any]] = {}
    for key, raw in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
        try:
            value = _decode_value(raw)
        except ValueError:
            _log.debug("url.value_skipped", key=key, value=raw)
            continue
        if key in _SCALAR_KEYS:
            patch[_SCALAR_KEYS[key]] = value
            continue
        match = _FILTER_KEY.match(key)
        if match is None:
            _log.debug("url.key_skipped", key=key)
            continue
        index, part, value_index = match.groups()
        entry = filters.setdefault(int(index), {"values": {}})
        if part == "values":
            entry["values"][int(value_index or 0)] = value
        else:
            entry[part] = value
    if filters:
        patch["filters"] = [
            {
                "field": entry["field"],
                "values": [entry["values"][k] for k in sorted(entry["values"])],
                "type": entry.get("type", "all"),
            }
            for _, entry in sorted(filters.items())
            if _valid_filter(entry)
        ]
    for name in ("current", "results_per_page"):
        if name in patch and not _is_positive_int(patch[name]):
            _log.debug("url.value_skipped", key=name, value=patch[name])
            del patch[name]
    for name in ("search_term", "sort_field", "sort_direction"):
        if name in patch and not isinstance(patch[name], str):
            _log.debug("url.value_skipped", key=name, value=patch[name])
            del patch[name]
    return patch


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _valid_filter(entry: dict[str, Any]) -> bool:
    if not isinstance(entry.get("field"), str):
        _log.debug("url.value_skipped", key="filters", value=entry.get("field"))
        return False
    filter_type = entry.get("type", "all")
    if not isinstance(filter_type, str) or filter_type not in FILTER_TYPES:
        _log.debug("url.value_skipped", key="filters", value=filter_type)
        return False
    return True
