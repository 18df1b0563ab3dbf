"""Retry policy with exponential backoff and jitter.

Delay before attempt n+1 (milliseconds):

    min(base_delay_ms * backoff_multiplier ** (n - 1) + jitter, max_delay_ms)

where jitter is uniform in [0, 1000). The policy keeps no state between
calls, so one instance can be shared by concurrent callers.
"""

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import TypeVar

from storefront.domain.protocols import LoggerProtocol
from storefront.infrastructure.resilience.errors import RetryExhaustedError

T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]

MAX_JITTER_MS = 1000.0


def default_jitter() -> float:
    return random.uniform(0.0, MAX_JITTER_MS)


@dataclass(frozen=True, slots=True, kw_only=True)
class RetryConfig:
    """Retry settings.

    Attributes:
        max_attempts: Total attempts including the first (> 0).
        base_delay_ms: Delay before the second attempt, before jitter (>= 0).
        max_delay_ms: Upper bound for any delay (>= base_delay_ms).
        backoff_multiplier: Growth factor per attempt (>= 1).
        retryable_errors: Substrings matched against the error message or
            class name. Empty or None retries every error.
    """

    max_attempts: int = 3
    base_delay_ms: float = 100
    max_delay_ms: float = 2_000
    backoff_multiplier: float = 2.0
    retryable_errors: tuple[str, ...] | None = None

    def validate(self) -> list[str]:
        """Return every violated constraint (empty when valid)."""
        errors: list[str] = []
        if self.max_attempts <= 0:
            errors.append("max_attempts must be greater than 0")
        if self.base_delay_ms < 0:
            errors.append("base_delay_ms cannot be negative")
        if self.max_delay_ms < self.base_delay_ms:
            errors.append("max_delay_ms must be greater than or equal to base_delay_ms")
        if self.backoff_multiplier < 1:
            errors.append("backoff_multiplier must be at least 1")
        return errors


class RetryPolicy:
    """Runs an async operation up to ``max_attempts`` times.

    Behavior:
        - Success returns immediately.
        - A non-retryable error raised before the final attempt propagates
          unchanged.
        - When the final attempt fails (retryable or not),
          RetryExhaustedError is raised with the last error chained.

    Usage:
        policy = RetryPolicy(RetryConfig(max_attempts=3, base_delay_ms=100))
        user = await policy.execute(lambda: store.find_by_id(user_id))
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        jitter: Callable[[], float] = default_jitter,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize retry policy.

        Args:
            config: Retry settings (defaults: 3 attempts, 100ms base, 2s max).
            sleep: Awaitable sleep taking seconds (tests inject a fake).
            jitter: Returns jitter in milliseconds.
            logger: Optional logger for retry attempts.

        Raises:
            ValueError: If the config violates any constraint.
        """
        self._config = config or RetryConfig()
        errors = self._config.validate()
        if errors:
            raise ValueError(f"Invalid retry configuration: {'; '.join(errors)}")
        self._sleep = sleep
        self._jitter = jitter
        self._logger = logger

    @property
    def config(self) -> RetryConfig:
        return self._config

    async def execute(self, operation: Operation[T]) -> T:
        """Run ``operation`` with retries.

        Raises:
            RetryExhaustedError: When the final attempt fails.
            Exception: Any non-retryable error from an earlier attempt.
        """
        max_attempts = self._config.max_attempts
        last_error: Exception | None = None

        for attempt in range(1, max_attempts + 1):
            try:
                return await operation()
            except Exception as exc:
                last_error = exc

                if attempt == max_attempts:
                    break
                if not self.is_retryable(exc):
                    raise

                delay_ms = self.calculate_delay(attempt)
                if self._logger is not None:
                    self._logger.warning(
                        "retry_attempt_failed",
                        attempt=attempt,
                        max_attempts=max_attempts,
                        delay_ms=round(delay_ms),
                        error_type=type(exc).__name__,
                    )
                await self._sleep(delay_ms / 1000)

        if self._logger is not None:
            self._logger.error(
                "retry_exhausted", error=last_error, attempts=max_attempts
            )
        raise RetryExhaustedError(max_attempts, last_error) from last_error

    def is_retryable(self, error: BaseException) -> bool:
        """Check an error against the allow-list."""
        patterns = self._config.retryable_errors
        if not patterns:
            return True
        message = str(error)
        name = type(error).__name__
        return any(pattern in message or pattern in name for pattern in patterns)

    def calculate_delay(self, attempt: int) -> float:
        """Delay in milliseconds after failed attempt number ``attempt``."""
        exponential = self._config.base_delay_ms * (
            self._config.backoff_multiplier ** (attempt - 1)
        )
        return min(exponential + self._jitter(), self._config.max_delay_ms)

    def with_max_attempts(self, max_attempts: int) -> "RetryPolicy":
        return self._derive(replace(self._config, max_attempts=max_attempts))

    def with_base_delay(self, base_delay_ms: float) -> "RetryPolicy":
        return self._derive(replace(self._config, base_delay_ms=base_delay_ms))

    def with_retryable_errors(self, *patterns: str) -> "RetryPolicy":
        return self._derive(replace(self._config, retryable_errors=tuple(patterns)))

    def _derive(self, config: RetryConfig) -> "RetryPolicy":
        return RetryPolicy(
            config, sleep=self._sleep, jitter=self._jitter, logger=self._logger
        )
