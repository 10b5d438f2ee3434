"""Domain errors – search state invariants and action arguments."""

from __future__ import annotations

from typing import Any, Iterable

from search_driver.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a search-state rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A state patch names an unknown field or carries an impossible value."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """An action received an argument it cannot apply.

    ``errors`` holds one ``{"field": ..., "value": ...}`` entry per rejected
    argument, so a UI can point at the control that produced it::

        try:
            driver.set_current(0)
        except ValidationError as exc:
            exc.errors  # [{"field": "current", "value": 0}]
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_argument(cls, field: str, value: Any, reason: str, **extra: Any) -> "ValidationError":
        """Build the error for a single rejected *field*."""
        return cls(f"{field} {reason}, got {value!r}", errors=[{"field": field, "value": value, **extra}])

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """A named entry (e.g. an a11y message) is not registered.

    ``known`` lists the registered names, when the caller has them.
    """

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        *,
        known: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier
        self.known: list[str] = sorted(known)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.known:
            base["known"] = self.known
        return base


__all__ = [
    "DomainError",
    "InvariantViolationError",
    "NotFoundError",
    "ValidationError",
]
