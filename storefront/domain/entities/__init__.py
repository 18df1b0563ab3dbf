"""Domain entities."""

from storefront.domain.entities.user import (
    LOCKOUT_DURATION,
    MAX_FAILED_LOGIN_ATTEMPTS,
    User,
)

__all__ = ["LOCKOUT_DURATION", "MAX_FAILED_LOGIN_ATTEMPTS", "User"]
