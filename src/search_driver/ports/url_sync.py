"""URLSync port – keeps the URL-tracked part of the state in a location string."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from search_driver.application.state import SearchState

#: Called by the collaborator with a state patch when the location changes externally.
URLChangeCallback = Callable[[Mapping[str, Any]], None]


@runtime_checkable
class URLSync(Protocol):
    """Port: state <-> location synchronisation.

    Instances are created by a :data:`URLSyncFactory` receiving the change
    callback; the driver never creates one when URL tracking is off.
    """

    def get_state_from_url(self) -> Mapping[str, Any]:
        """Return the state patch encoded in the current location."""
        ...

    def push_state_to_url(self, state: SearchState, *, replace_url: bool = False) -> None:
        """Serialise *state* into the location."""
        ...

    def tear_down(self) -> None:
        """Detach any location listeners."""
        ...


URLSyncFactory = Callable[[URLChangeCallback], URLSync]

__all__ = ["URLChangeCallback", "URLSync", "URLSyncFactory"]
