"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Secrets have NO defaults; services that need them fail at construction

Recognized variables:
    JWT_SECRET               Access-token signing secret (required by token service)
    JWT_REFRESH_SECRET       Refresh-token signing secret (required by token service)
    JWT_EXPIRATION           Access-token lifetime in milliseconds (3600000)
    JWT_REFRESH_EXPIRATION   Refresh-token lifetime in milliseconds (604800000)
    AES_SECRET_KEY           Key for at-rest encryption, exactly 32 characters
    BCRYPT_ROUNDS            bcrypt cost factor (12)
    ACCOUNT_STORE_*          Resilience settings for the account store

Usage:
    from storefront.core.config import get_settings

    settings = get_settings()
    if settings.is_production:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.core.enums import Environment


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON (testing/CI) instead of colored console output",
    )

    # Application metadata
    app_name: str = Field(default="Storefront", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    api_v1_prefix: str = Field(default="/api/v1", description="API v1 route prefix")

    # Token signing
    jwt_secret: str | None = Field(
        default=None,
        description="Secret for access-token signing (HS512). Required, no default.",
    )
    jwt_refresh_secret: str | None = Field(
        default=None,
        description="Separate secret for refresh-token signing (HS512)",
    )
    jwt_expiration: int = Field(
        default=3_600_000,
        description="Access token lifetime in milliseconds (1 hour)",
    )
    jwt_refresh_expiration: int = Field(
        default=604_800_000,
        description="Refresh token lifetime in milliseconds (7 days)",
    )

    # Password hashing
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt cost factor (10-14 recommended, 12 = ~250ms)",
    )

    # At-rest encryption
    aes_secret_key: str | None = Field(
        default=None,
        description="Symmetric key for auxiliary at-rest encryption (exactly 32 characters)",
    )

    # Account store resilience
    account_store_resilience_enabled: bool = Field(
        default=True,
        description="Wrap account store calls with circuit breaker + retry",
    )
    account_store_failure_threshold: int = Field(
        default=5,
        description="Consecutive failures before the account-store breaker opens",
    )
    account_store_success_threshold: int = Field(
        default=2,
        description="Consecutive HALF_OPEN successes before the breaker closes",
    )
    account_store_timeout_ms: int = Field(
        default=30_000,
        description="Milliseconds the breaker stays OPEN before a probe is allowed",
    )
    account_store_retry_attempts: int = Field(
        default=3,
        description="Maximum attempts per account-store call",
    )
    account_store_retry_base_delay_ms: int = Field(
        default=100,
        description="Base retry delay in milliseconds",
    )
    account_store_retry_max_delay_ms: int = Field(
        default=2_000,
        description="Maximum retry delay in milliseconds",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the supported range.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("jwt_expiration", "jwt_refresh_expiration")
    @classmethod
    def validate_positive_lifetime(cls, v: int) -> int:
        """
        Token lifetimes must be positive.

        Raises:
            ValueError: If lifetime is zero or negative.
        """
        if v <= 0:
            raise ValueError("token lifetime must be a positive number of milliseconds")
        return v

    @field_validator("aes_secret_key")
    @classmethod
    def validate_aes_secret_key(cls, v: str | None) -> str | None:
        """
        At-rest encryption key must be exactly 32 characters when provided.

        Raises:
            ValueError: If key length is not 32.
        """
        if v is not None and len(v) != 32:
            raise ValueError("aes_secret_key must be exactly 32 characters long")
        return v

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Loaded once per process. Tests call ``get_settings.cache_clear()`` after
    changing environment variables.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
