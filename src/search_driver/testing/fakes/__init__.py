"""Testing fakes – in-memory doubles for the driver's ports."""
from search_driver.testing.fakes.connector import (
    DEFAULT_AUTOCOMPLETE_RESPONSE,
    DEFAULT_SEARCH_RESPONSE,
    RecordingAPIConnector,
)
from search_driver.testing.fakes.url import RecordingURLSync, RecordingURLSyncFactory

__all__ = [
    "DEFAULT_AUTOCOMPLETE_RESPONSE",
    "DEFAULT_SEARCH_RESPONSE",
    "RecordingAPIConnector",
    "RecordingURLSync",
    "RecordingURLSyncFactory",
]
