"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError (SearchDriverError)
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── ExternalServiceError
"""

from search_driver.kernel.errors.application import ApplicationError
from search_driver.kernel.errors.base import BaseError, SearchDriverError
from search_driver.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from search_driver.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "SearchDriverError",
    "ValidationError",
]
