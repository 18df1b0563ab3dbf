"""Circuit breaker for calls to dependent services.

States:
    - CLOSED: Normal operation; consecutive failures are counted and
      ``failure_threshold`` of them trip the breaker.
    - OPEN: Calls are rejected with CircuitOpenError until ``timeout_ms``
      has elapsed since the trip; the first call after that probes.
    - HALF_OPEN: ``success_threshold`` consecutive successes close the
      breaker; any failure trips it again.

Timing uses a monotonic clock (injectable). State transitions are guarded by
an asyncio.Lock that is never held while the protected operation runs.

Every transition starts a new generation. A call remembers the generation
that admitted it, and an outcome from an earlier generation only updates the
request totals: it cannot trip an OPEN breaker again, and a call admitted
while CLOSED cannot count as a HALF_OPEN probe success.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import TypeVar

from storefront.domain.protocols import LoggerProtocol
from storefront.infrastructure.resilience.errors import CircuitOpenError

T = TypeVar("T")


class CircuitState(str, Enum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF_OPEN"


@dataclass(frozen=True, slots=True, kw_only=True)
class CircuitBreakerConfig:
    """Circuit breaker thresholds.

    Attributes:
        failure_threshold: Consecutive CLOSED failures that trip the breaker.
        success_threshold: Consecutive HALF_OPEN successes that close it.
        timeout_ms: Milliseconds to stay OPEN before allowing a probe.
    """

    failure_threshold: int = 5
    success_threshold: int = 2
    timeout_ms: float = 60_000

    def __post_init__(self) -> None:
        if self.failure_threshold <= 0:
            raise ValueError("failure_threshold must be greater than 0")
        if self.success_threshold <= 0:
            raise ValueError("success_threshold must be greater than 0")
        if self.timeout_ms < 0:
            raise ValueError("timeout_ms cannot be negative")


@dataclass(frozen=True, slots=True, kw_only=True)
class CircuitBreakerMetrics:
    """Point-in-time snapshot of a breaker.

    ``next_attempt_time`` is on the breaker's monotonic clock and only set
    while OPEN.
    """

    name: str
    state: CircuitState
    failure_count: int
    success_count: int
    total_requests: int
    failed_requests: int
    successful_requests: int
    last_failure_time: datetime | None
    last_success_time: datetime | None
    next_attempt_time: float | None


class CircuitBreaker:
    """Async circuit breaker.

    Usage:
        breaker = CircuitBreaker("account-store", CircuitBreakerConfig())
        user = await breaker.execute(lambda: store.find_by_id(user_id))
    """

    def __init__(
        self,
        name: str,
        config: CircuitBreakerConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._name = name
        self._config = config or CircuitBreakerConfig()
        self._clock = clock
        self._logger = logger
        self._lock = asyncio.Lock()

        self._state = CircuitState.CLOSED
        self._generation = 0
        self._failure_count = 0
        self._success_count = 0
        self._next_attempt_time: float | None = None
        self._last_failure_time: datetime | None = None
        self._last_success_time: datetime | None = None
        self._total_requests = 0
        self._failed_requests = 0
        self._successful_requests = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> CircuitState:
        return self._state

    @property
    def config(self) -> CircuitBreakerConfig:
        return self._config

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` through the breaker.

        Raises:
            CircuitOpenError: If OPEN and the timeout has not elapsed.
            Exception: Whatever ``operation`` raised, after bookkeeping.
        """
        async with self._lock:
            if self._state is CircuitState.OPEN:
                now = self._clock()
                next_attempt = self._next_attempt_time or now
                if now < next_attempt:
                    raise CircuitOpenError(self._name, next_attempt - now)
                self._transition(CircuitState.HALF_OPEN)
                self._success_count = 0
            self._total_requests += 1
            generation = self._generation

        try:
            result = await operation()
        except Exception:
            async with self._lock:
                self._on_failure(stale=generation != self._generation)
            raise

        async with self._lock:
            self._on_success(stale=generation != self._generation)
        return result

    def get_metrics(self) -> CircuitBreakerMetrics:
        return CircuitBreakerMetrics(
            name=self._name,
            state=self._state,
            failure_count=self._failure_count,
            success_count=self._success_count,
            total_requests=self._total_requests,
            failed_requests=self._failed_requests,
            successful_requests=self._successful_requests,
            last_failure_time=self._last_failure_time,
            last_success_time=self._last_success_time,
            next_attempt_time=self._next_attempt_time,
        )

    def force_open(self) -> None:
        """Trip the breaker manually (maintenance, known outage)."""
        self._trip()

    def force_close(self) -> None:
        """Close the breaker manually and clear its counters."""
        self._reset()

    def _on_success(self, *, stale: bool = False) -> None:
        self._successful_requests += 1
        self._last_success_time = datetime.now(UTC)
        if stale:
            return

        if self._state is CircuitState.HALF_OPEN:
            self._success_count += 1
            if self._success_count >= self._config.success_threshold:
                self._reset()
        else:
            self._failure_count = 0

    def _on_failure(self, *, stale: bool = False) -> None:
        self._failed_requests += 1
        self._last_failure_time = datetime.now(UTC)
        if stale:
            return
        self._failure_count += 1

        if self._state is CircuitState.HALF_OPEN:
            self._trip()
        elif self._failure_count >= self._config.failure_threshold:
            self._trip()

    def _trip(self) -> None:
        self._transition(CircuitState.OPEN)
        self._next_attempt_time = self._clock() + self._config.timeout_ms / 1000
        self._success_count = 0

    def _reset(self) -> None:
        self._transition(CircuitState.CLOSED)
        self._failure_count = 0
        self._success_count = 0
        self._next_attempt_time = None

    def _transition(self, new_state: CircuitState) -> None:
        old_state = self._state
        self._state = new_state
        self._generation += 1
        if self._logger is None or old_state is new_state:
            return
        log = (
            self._logger.warning
            if new_state is CircuitState.OPEN
            else self._logger.info
        )
        log(
            "circuit_breaker_state_changed",
            circuit_breaker=self._name,
            from_state=old_state.value,
            to_state=new_state.value,
            failure_count=self._failure_count,
        )
