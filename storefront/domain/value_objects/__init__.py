"""Domain value objects package."""

from storefront.domain.value_objects.password_strength import PasswordStrength
from storefront.domain.value_objects.tokens import (
    AuthenticatedIdentity,
    RefreshPayload,
    TokenPair,
    TokenPayload,
)

__all__ = [
    "AuthenticatedIdentity",
    "PasswordStrength",
    "RefreshPayload",
    "TokenPair",
    "TokenPayload",
]
