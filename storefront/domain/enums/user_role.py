"""User roles for route-level authorization.

Role tags are embedded in access tokens and checked by the role-gate
dependencies of the HTTP layer.

    - ADMIN: Back-office access (user administration, resilience metrics)
    - USER: Regular customer (default role on registration)
    - PROVIDER: Catalog supplier

Usage:
    from storefront.domain.enums import UserRole

    if UserRole.ADMIN in user.roles:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User role tags.

    String enum so values serialize directly into JWT claims.
    """

    ADMIN = "ADMIN"
    USER = "USER"
    PROVIDER = "PROVIDER"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['ADMIN', 'USER', 'PROVIDER'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
