"""Application sequencing – RequestSequencer.

Every query family keeps its own monotonically increasing counter.  A
response is applied only when the token captured at issue time is still the
family's latest; anything older is stale and gets discarded.
"""
from __future__ import annotations

import dataclasses
from enum import Enum

__all__ = ["RequestFamily", "RequestSequencer", "RequestToken"]


class RequestFamily(str, Enum):
    SEARCH = "search"
    AUTOCOMPLETE = "autocomplete"


@dataclasses.dataclass(frozen=True, slots=True)
class RequestToken:
    family: RequestFamily
    sequence: int


class RequestSequencer:
    def __init__(self) -> None:
        self._counters: dict[RequestFamily, int] = {family: 0 for family in RequestFamily}

    def issue(self, family: RequestFamily) -> RequestToken:
        self._counters[family] += 1
        return RequestToken(family, self._counters[family])

    def latest(self, family: RequestFamily) -> int:
        return self._counters[family]

    def is_current(self, token: RequestToken) -> bool:
        return self._counters[token.family] == token.sequence

    def is_stale(self, token: RequestToken) -> bool:
        return not self.is_current(token)
