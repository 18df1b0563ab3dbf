"""Repository factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from storefront.core.config import get_settings
from storefront.core.container.infrastructure import (
    get_circuit_breaker_registry,
    get_logger,
)

if TYPE_CHECKING:
    from storefront.domain.protocols import UserRepository

ACCOUNT_STORE_BREAKER = "account-store"


@lru_cache()
def get_user_repository() -> "UserRepository":
    """Get the account store singleton.

    Returns InMemoryUserRepository, wrapped in ResilientUserRepository
    (circuit breaker "account-store" + retry) when
    ACCOUNT_STORE_RESILIENCE_ENABLED is true.
    """
    from storefront.infrastructure.persistence import (
        InMemoryUserRepository,
        ResilientUserRepository,
    )
    from storefront.infrastructure.resilience import (
        CircuitBreakerConfig,
        ResilientService,
        RetryConfig,
    )

    settings = get_settings()
    store = InMemoryUserRepository()
    if not settings.account_store_resilience_enabled:
        return store

    resilience = ResilientService(
        ACCOUNT_STORE_BREAKER,
        get_circuit_breaker_registry(),
        CircuitBreakerConfig(
            failure_threshold=settings.account_store_failure_threshold,
            success_threshold=settings.account_store_success_threshold,
            timeout_ms=settings.account_store_timeout_ms,
        ),
        RetryConfig(
            max_attempts=settings.account_store_retry_attempts,
            base_delay_ms=settings.account_store_retry_base_delay_ms,
            max_delay_ms=settings.account_store_retry_max_delay_ms,
        ),
        logger=get_logger(),
    )
    return ResilientUserRepository(store, resilience)
