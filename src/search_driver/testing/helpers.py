"""Testing helpers – build a driver wired to recording fakes."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from search_driver.application.state import SearchState
from search_driver.driver import SearchDriver
from search_driver.testing.fakes import RecordingAPIConnector, RecordingURLSyncFactory

__all__ = ["DriverSetup", "has_response_data", "setup_driver"]


@dataclasses.dataclass
class DriverSetup:
    driver: SearchDriver
    connector: RecordingAPIConnector
    url_sync_factory: RecordingURLSyncFactory
    state_after_creation: SearchState


def setup_driver(
    *,
    search_response: Mapping[str, Any] | None = None,
    autocomplete_response: Mapping[str, Any] | None = None,
    url_state: Mapping[str, Any] | None = None,
    **driver_kwargs: Any,
) -> DriverSetup:
    """Create a driver with a :class:`RecordingAPIConnector` and URL-sync factory.

    Call outside a running event loop to have the initial search (if any)
    resolved by the time this returns.
    """
    connector = RecordingAPIConnector(search_response, autocomplete_response)
    factory = RecordingURLSyncFactory(url_state)
    driver = SearchDriver(connector, url_sync_factory=factory, **driver_kwargs)
    return DriverSetup(driver, connector, factory, driver.get_state())


def has_response_data(state: SearchState) -> bool:
    return bool(state.results) and state.total_results > 0 and bool(state.request_id)
