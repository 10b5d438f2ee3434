"""Application actions – argument validation."""
from __future__ import annotations

from typing import Any

from search_driver.kernel.errors import ValidationError

__all__ = ["require_positive_int"]


def require_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError.for_argument(name, value, "must be a positive integer")
    return value
