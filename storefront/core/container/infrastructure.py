"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Password hashing (bcrypt)
- Token generation (JWT, HS512)
- Encryption (AES-256-GCM)
- Circuit breaker registry
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from storefront.core.config import get_settings
from storefront.core.errors import ConfigurationError

if TYPE_CHECKING:
    from storefront.domain.protocols import (
        LoggerProtocol,
        PasswordHashingProtocol,
        TokenGenerationProtocol,
    )
    from storefront.infrastructure.resilience import CircuitBreakerRegistry
    from storefront.infrastructure.security import EncryptionService


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development/production: ConsoleAdapter (human-readable unless LOG_JSON)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from storefront.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    use_json = settings.log_json or settings.environment.value in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level).bind(
        app=settings.app_name, environment=settings.environment.value
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton (cost from BCRYPT_ROUNDS)."""
    from storefront.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Raises:
        ConfigurationError: If JWT_SECRET or JWT_REFRESH_SECRET is missing
            or shorter than 32 bytes.
    """
    from storefront.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.jwt_secret,
        refresh_secret_key=settings.jwt_refresh_secret,
        access_expiration_ms=settings.jwt_expiration,
        refresh_expiration_ms=settings.jwt_refresh_expiration,
    )


@lru_cache()
def get_encryption_service() -> "EncryptionService":
    """Get encryption service singleton (app-scoped).

    Uses AES_SECRET_KEY for AES-256-GCM encryption.

    Raises:
        ConfigurationError: If the key is missing or not 32 bytes.
    """
    from storefront.core.result import Failure, Success
    from storefront.infrastructure.security import EncryptionService

    match EncryptionService.create(get_settings().aes_secret_key):
        case Success(value=service):
            return service
        case Failure(error=err):
            raise ConfigurationError(
                f"Failed to initialize encryption service: {err.message}"
            )


@lru_cache()
def get_circuit_breaker_registry() -> "CircuitBreakerRegistry":
    """One registry per application; breakers register into it on creation."""
    from storefront.infrastructure.resilience import CircuitBreakerRegistry

    return CircuitBreakerRegistry(logger=get_logger())
