"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented programming
- Base error classes and error codes
- Settings and the dependency container

The core module has NO dependencies on other application layers
(the container is the composition root and imports lazily).
"""

from storefront.core.enums import ErrorCode
from storefront.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
    WeakPasswordError,
)
from storefront.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "ServiceUnavailableError",
    "Success",
    "ValidationError",
    "WeakPasswordError",
]
