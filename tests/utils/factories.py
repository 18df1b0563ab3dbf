"""Entity factories and constants for tests."""

from storefront.domain.entities.user import User
from storefront.domain.enums import UserRole

ACCESS_SECRET = "a" * 32
REFRESH_SECRET = "r" * 32
STRONG_PASSWORD = "SecurePass123!"


def create_user(**overrides) -> User:
    """Build a valid User with sensible defaults."""
    fields = {
        "email": "user@example.com",
        "password_hash": "$2b$10$hash",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "roles": [UserRole.USER],
    }
    fields.update(overrides)
    return User(**fields)
