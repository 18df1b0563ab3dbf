"""Common error classes shared by every layer.

Error Types:
- ValidationError: Input validation failures
- WeakPasswordError: Password strength rules violated (carries every violation)
- NotFoundError: Resource not found
- ConflictError: Duplicate resource
- AuthenticationError: Credential, token, or account-state failures
- AuthorizationError: Authenticated but not allowed
- ServiceUnavailableError: A dependency failed or is short-circuited

Usage:
    from storefront.core.errors import ValidationError
    from storefront.core.enums import ErrorCode
    from storefront.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    ))
"""

from dataclasses import dataclass, field as dataclass_field

from storefront.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class WeakPasswordError(ValidationError):
    """Password rejected by the strength policy.

    Attributes:
        violations: Every rule the password broke, in policy order.
    """

    violations: list[str] = dataclass_field(default_factory=list)


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate email, ...).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (bad credentials, invalid token, account state)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure.

    Attributes:
        required_permission: Permission or role that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceUnavailableError(DomainError):
    """Dependency failure surfaced without leaking internals.

    Attributes:
        dependency: Logical name of the failing dependency.
    """

    dependency: str | None = None
