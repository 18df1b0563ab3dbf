"""Container module - Centralized dependency injection.

Composition root. Every factory is an ``lru_cache`` singleton built from
``get_settings()``; tests call ``reset_container()`` after changing settings
and override FastAPI dependencies through ``app.dependency_overrides``.

    from storefront.core.container import get_auth_service, get_logger

The container is organized into modules:
- infrastructure: logging, password hashing, tokens, encryption, circuit breakers
- repositories: account store (resilience-wrapped when enabled)
- services: application services
"""

from storefront.core.container.infrastructure import (
    get_circuit_breaker_registry,
    get_encryption_service,
    get_logger,
    get_password_service,
    get_token_service,
)
from storefront.core.container.repositories import get_user_repository
from storefront.core.container.services import get_auth_service

_FACTORIES = (
    get_auth_service,
    get_user_repository,
    get_circuit_breaker_registry,
    get_encryption_service,
    get_token_service,
    get_password_service,
    get_logger,
)


def reset_container() -> None:
    """Drop every cached singleton (settings included)."""
    from storefront.core.config import get_settings

    for factory in _FACTORIES:
        factory.cache_clear()
    get_settings.cache_clear()


__all__ = [
    "get_auth_service",
    "get_circuit_breaker_registry",
    "get_encryption_service",
    "get_logger",
    "get_password_service",
    "get_token_service",
    "get_user_repository",
    "reset_container",
]
