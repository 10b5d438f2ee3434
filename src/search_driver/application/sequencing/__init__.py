"""Application sequencing – last-issued-wins request tokens."""
from search_driver.application.sequencing.sequencer import RequestFamily, RequestSequencer, RequestToken

__all__ = ["RequestFamily", "RequestSequencer", "RequestToken"]
