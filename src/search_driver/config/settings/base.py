"""Config settings – Settings base class and env-key naming."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction whatever the source (environment, ``.env`` file or
    explicit overrides).
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Variable name for *field_name*, e.g. ``SEARCH_DRIVER_SEARCH_DEBOUNCE``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Hook for cross-field checks; raise a ``ConfigError`` subclass."""


__all__ = ["Settings"]
