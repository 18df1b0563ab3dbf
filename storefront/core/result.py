"""Result types for railway-oriented programming.

Authentication outcomes are expected failures (wrong password, locked account,
expired token), so they travel as values instead of exceptions. Callers
pattern-match on the result and decide how to surface the error.

Usage:
    result = await auth_service.login(email, password)
    match result:
        case Success(value=auth):
            tokens = auth.tokens
        case Failure(error=error):
            logger.warning("Login rejected", reason=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error describing why the operation failed.
    """

    error: E


Result = Success[T] | Failure[E]
