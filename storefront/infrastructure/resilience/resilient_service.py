"""Circuit breaker + retry composition for one dependent service.

The retry loop runs inside the breaker, so the breaker records one outcome
per logical call: a call that succeeds on its third attempt counts as one
success, and one that exhausts its retries counts as one failure.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from storefront.domain.protocols import LoggerProtocol
from storefront.infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerMetrics,
)
from storefront.infrastructure.resilience.circuit_breaker_registry import (
    CircuitBreakerRegistry,
)
from storefront.infrastructure.resilience.retry_policy import (
    RetryConfig,
    RetryPolicy,
    default_jitter,
)

T = TypeVar("T")


class ResilientService:
    """Protects calls to a named dependency.

    The breaker is registered with ``registry`` under ``name`` on
    construction, so its metrics show up in ``registry.get_all_metrics()``.

    Raises (from execute_with_resilience):
        CircuitOpenError: Breaker is OPEN.
        RetryExhaustedError: Every attempt failed.
        Exception: A non-retryable error from the operation.
    """

    def __init__(
        self,
        name: str,
        registry: CircuitBreakerRegistry,
        circuit_breaker_config: CircuitBreakerConfig | None = None,
        retry_config: RetryConfig | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        jitter: Callable[[], float] = default_jitter,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._circuit_breaker = registry.register(name, circuit_breaker_config)
        self._retry_policy = RetryPolicy(
            retry_config,
            sleep=sleep,
            jitter=jitter,
            logger=logger.bind(dependency=name) if logger is not None else None,
        )

    async def execute_with_resilience(
        self, operation: Callable[[], Awaitable[T]]
    ) -> T:
        return await self._circuit_breaker.execute(
            lambda: self._retry_policy.execute(operation)
        )

    def get_metrics(self) -> CircuitBreakerMetrics:
        return self._circuit_breaker.get_metrics()

    @property
    def circuit_breaker(self) -> CircuitBreaker:
        return self._circuit_breaker

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy
