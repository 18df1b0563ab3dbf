"""In-memory account store.

Default UserRepository adapter. Keeps copies of entities so callers cannot
mutate stored state without calling save().
"""

import asyncio
import copy
from uuid import UUID

from uuid_extensions import uuid7

from storefront.domain.entities.user import User
from storefront.domain.errors import DuplicateEmailError


class InMemoryUserRepository:
    """Dict-backed user store with a case-insensitive email index.

    Implements UserRepository (structural typing).
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._ids_by_email: dict[str, UUID] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, user_id: UUID) -> User | None:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user is not None else None

    async def find_by_email(self, email: str) -> User | None:
        user_id = self._ids_by_email.get(email.strip().lower())
        if user_id is None:
            return None
        return await self.find_by_id(user_id)

    async def save(self, user: User) -> User:
        """Insert or update ``user``; assigns an id on first save.

        Raises:
            DuplicateEmailError: If another account owns the email.
        """
        async with self._lock:
            email_key = user.email.lower()
            owner_id = self._ids_by_email.get(email_key)
            if owner_id is not None and owner_id != user.id:
                raise DuplicateEmailError(user.email)

            if user.id is None:
                user.id = uuid7()
            else:
                previous = self._users.get(user.id)
                if previous is not None and previous.email != email_key:
                    self._ids_by_email.pop(previous.email, None)

            self._users[user.id] = copy.deepcopy(user)
            self._ids_by_email[email_key] = user.id
            return user

    def __len__(self) -> int:
        return len(self._users)
