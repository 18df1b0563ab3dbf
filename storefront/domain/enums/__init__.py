"""Domain enums package."""

from storefront.domain.enums.user_role import UserRole

__all__ = ["UserRole"]
