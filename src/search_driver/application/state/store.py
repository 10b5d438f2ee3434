"""Application state – StateStore, the single owner of the committed state."""
from __future__ import annotations

import copy
from typing import Any, Callable, Mapping

from search_driver.application.state.state import DEFAULT_STATE, SearchState

__all__ = ["StateStore"]


class StateStore:
    """Holds the authoritative :class:`SearchState` and applies patches.

    ``commit`` swaps the snapshot first and only then calls *on_commit*, so
    ``get_state()`` inside a notification already returns the merged state.
    Derived fields are never recomputed here; the caller supplies them in
    the patch.
    """

    def __init__(
        self,
        initial: SearchState = DEFAULT_STATE,
        on_commit: Callable[[SearchState], None] | None = None,
    ) -> None:
        self._state = initial
        self._on_commit = on_commit
        self._version = 0

    @property
    def version(self) -> int:
        """Number of commits applied so far."""
        return self._version

    @property
    def current(self) -> SearchState:
        """Committed snapshot without copying; for the driver's own reads."""
        return self._state

    def get_state(self) -> SearchState:
        """Return a deep copy of the committed snapshot."""
        return copy.deepcopy(self._state)

    def commit(self, patch: Mapping[str, Any]) -> SearchState:
        new_state = self._state.merge(patch)
        self._state = new_state
        self._version += 1
        if self._on_commit is not None:
            self._on_commit(self.get_state())
        return new_state

    def replace(self, state: SearchState) -> SearchState:
        """Commit *state* wholesale (used by ``reset``)."""
        return self.commit({f: getattr(state, f) for f in state.__dataclass_fields__})
