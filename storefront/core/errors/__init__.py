"""Core errors package.

Usage:
    from storefront.core.errors import DomainError, ValidationError, NotFoundError
"""

from storefront.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
    WeakPasswordError,
)
from storefront.core.errors.configuration_error import ConfigurationError
from storefront.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ServiceUnavailableError",
    "ValidationError",
    "WeakPasswordError",
]
