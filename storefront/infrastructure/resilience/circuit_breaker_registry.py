"""Named circuit breaker registry.

One registry per application container; it is passed to whoever needs it
rather than reached through a global.
"""

import time
from collections.abc import Callable

from storefront.domain.protocols import LoggerProtocol
from storefront.infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerMetrics,
)
from storefront.infrastructure.resilience.errors import (
    CircuitBreakerAlreadyRegisteredError,
    CircuitBreakerNotFoundError,
)


class CircuitBreakerRegistry:
    """Holds circuit breakers by unique name.

    Usage:
        registry = CircuitBreakerRegistry(logger=logger)
        breaker = registry.register("account-store", CircuitBreakerConfig())
        registry.get_all_metrics()["account-store"].state
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._breakers: dict[str, CircuitBreaker] = {}
        self._clock = clock
        self._logger = logger

    @property
    def clock(self) -> Callable[[], float]:
        """Monotonic clock shared by every breaker in this registry."""
        return self._clock

    def register(
        self, name: str, config: CircuitBreakerConfig | None = None
    ) -> CircuitBreaker:
        """Create and register a breaker.

        Raises:
            CircuitBreakerAlreadyRegisteredError: If the name is taken.
        """
        if name in self._breakers:
            raise CircuitBreakerAlreadyRegisteredError(name)
        breaker = CircuitBreaker(
            name, config, clock=self._clock, logger=self._logger
        )
        self._breakers[name] = breaker
        return breaker

    def get(self, name: str) -> CircuitBreaker:
        """Look up a breaker.

        Raises:
            CircuitBreakerNotFoundError: If no breaker has that name.
        """
        try:
            return self._breakers[name]
        except KeyError:
            raise CircuitBreakerNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._breakers)

    def remove(self, name: str) -> bool:
        """Unregister a breaker. Returns False if it was not registered."""
        return self._breakers.pop(name, None) is not None

    def get_all_metrics(self) -> dict[str, CircuitBreakerMetrics]:
        return {name: b.get_metrics() for name, b in self._breakers.items()}

    def clear(self) -> None:
        self._breakers.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._breakers

    def __len__(self) -> int:
        return len(self._breakers)
