"""UserRepository protocol for account persistence.

Port (interface) for hexagonal architecture. The account store is the only
dependency the authentication core reaches over the network, so adapters may
raise arbitrary exceptions on transport failure; AuthService translates those
into SERVICE_UNAVAILABLE.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email (case-insensitive)
        save: Create or update user (upsert)
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email comparison must be case-insensitive.

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> User:
        """Persist a user (insert or update).

        Assigns ``user.id`` on first save.

        Args:
            user: User entity to persist.

        Returns:
            The persisted user, with id set.

        Raises:
            DuplicateEmailError: If another account owns the email. Adapters
                must raise it unchanged, never as a transport failure.

        Example:
            >>> user = await repo.save(User(email="new@example.com", ...))
            >>> user.id is not None
            True
        """
        ...
