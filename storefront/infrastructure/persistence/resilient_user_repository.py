"""UserRepository decorator adding circuit breaker + retry."""

from uuid import UUID

from storefront.domain.entities.user import User
from storefront.domain.errors import DuplicateEmailError
from storefront.domain.protocols import UserRepository
from storefront.infrastructure.resilience import ResilientService


class ResilientUserRepository:
    """Wraps every store call with ``ResilientService.execute_with_resilience``.

    Store errors surface as CircuitOpenError / RetryExhaustedError, or as
    the original error when it is not retryable. DuplicateEmailError is an
    answer from a healthy store: it is raised unchanged, never retried, and
    counts as a breaker success.
    """

    def __init__(self, inner: UserRepository, resilience: ResilientService) -> None:
        self._inner = inner
        self._resilience = resilience

    @property
    def resilience(self) -> ResilientService:
        return self._resilience

    async def find_by_id(self, user_id: UUID) -> User | None:
        return await self._resilience.execute_with_resilience(
            lambda: self._inner.find_by_id(user_id)
        )

    async def find_by_email(self, email: str) -> User | None:
        return await self._resilience.execute_with_resilience(
            lambda: self._inner.find_by_email(email)
        )

    async def save(self, user: User) -> User:
        outcome = await self._resilience.execute_with_resilience(
            lambda: self._save_or_conflict(user)
        )
        if isinstance(outcome, DuplicateEmailError):
            raise outcome
        return outcome

    async def _save_or_conflict(self, user: User) -> User | DuplicateEmailError:
        try:
            return await self._inner.save(user)
        except DuplicateEmailError as e:
            return e
