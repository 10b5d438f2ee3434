"""Infrastructure errors – failures of injected collaborators."""

from __future__ import annotations

from typing import Any

from search_driver.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Collaborator / I/O failure that is not a search-state rule violation."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """A backend collaborator (API connector) failed or answered badly."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.operation = operation


__all__ = ["ExternalServiceError", "InfrastructureError"]
