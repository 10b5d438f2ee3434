"""Config settings – DriverSettings."""
from __future__ import annotations

import dataclasses
import logging

from search_driver.config.settings.base import Settings
from search_driver.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class DriverSettings(Settings):
    """Runtime switches of a :class:`~search_driver.driver.SearchDriver`.

    Read from ``SEARCH_DRIVER_*`` environment variables by
    :class:`~search_driver.config.settings.loaders.EnvSettingsLoader`.
    ``search_debounce`` is in seconds; ``0`` disables debouncing.
    """

    _prefix: dataclasses.ClassVar[str] = "SEARCH_DRIVER"

    track_url_state: bool = True
    always_search_on_initial_load: bool = False
    has_a11y_notifications: bool = False
    search_debounce: float = 0.0
    results_per_page: int = 20
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.results_per_page < 1:
            raise InvalidSettingValueError(
                "results_per_page", self.results_per_page, "must be >= 1"
            )
        if self.search_debounce < 0:
            raise InvalidSettingValueError(
                "search_debounce", self.search_debounce, "must not be negative"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "unknown logging level"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["DriverSettings"]
