"""A11y adapter – LoggingA11yNotifier."""
from __future__ import annotations

from typing import Any

from search_driver.observability.logging import get_logger

__all__ = ["LoggingA11yNotifier"]


class LoggingA11yNotifier:
    """Headless stand-in for a live region: logs each message and keeps the last."""

    def __init__(self, logger: Any = None) -> None:
        self._log = logger or get_logger(__name__)
        self.messages: list[str] = []

    @property
    def last_message(self) -> str | None:
        return self.messages[-1] if self.messages else None

    def announce(self, message: str) -> None:
        self.messages.append(message)
        self._log.info("a11y.announce", message=message)
