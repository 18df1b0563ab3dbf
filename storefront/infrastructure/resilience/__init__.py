"""Resilience primitives: retry, circuit breaker, registry, composition.

Usage:
    from storefront.infrastructure.resilience import (
        CircuitBreakerRegistry,
        ResilientService,
    )

    registry = CircuitBreakerRegistry()
    service = ResilientService("account-store", registry)
    user = await service.execute_with_resilience(lambda: store.find_by_id(uid))
"""

from storefront.infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerMetrics,
    CircuitState,
)
from storefront.infrastructure.resilience.circuit_breaker_registry import (
    CircuitBreakerRegistry,
)
from storefront.infrastructure.resilience.errors import (
    CircuitBreakerAlreadyRegisteredError,
    CircuitBreakerNotFoundError,
    CircuitOpenError,
    ResilienceError,
    RetryExhaustedError,
)
from storefront.infrastructure.resilience.resilient_service import ResilientService
from storefront.infrastructure.resilience.retry_policy import RetryConfig, RetryPolicy

__all__ = [
    "CircuitBreaker",
    "CircuitBreakerAlreadyRegisteredError",
    "CircuitBreakerConfig",
    "CircuitBreakerMetrics",
    "CircuitBreakerNotFoundError",
    "CircuitBreakerRegistry",
    "CircuitOpenError",
    "CircuitState",
    "ResilienceError",
    "ResilientService",
    "RetryConfig",
    "RetryExhaustedError",
    "RetryPolicy",
]
