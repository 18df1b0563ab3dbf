"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA512.

Security:
    - HMAC-SHA512 (HS512) algorithm
    - Separate secrets for access and refresh tokens, each at least 32 bytes
    - A "type" claim stops one kind of token being accepted as the other
    - Unique JWT ID (jti) per token, so every issued token is distinct

Claims:
    Access:  sub, email, roles, type="access", iat, exp, jti
    Refresh: sub, type="refresh", iat, exp, jti

Lifetimes are configured in milliseconds; exp = iat + floor(ms / 1000).
"""

from datetime import UTC, datetime
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from storefront.core.enums import ErrorCode
from storefront.core.errors import ConfigurationError, DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import AuthenticationError
from storefront.domain.value_objects import RefreshPayload, TokenPair, TokenPayload

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"
MIN_SECRET_BYTES = 32

DEFAULT_ACCESS_EXPIRATION_MS = 3_600_000
DEFAULT_REFRESH_EXPIRATION_MS = 604_800_000

_ACCESS_REQUIRED_CLAIMS = ["sub", "email", "roles", "type", "iat", "exp"]
_REFRESH_REQUIRED_CLAIMS = ["sub", "type", "iat", "exp"]


def _check_secret(secret: str | None, name: str) -> str:
    if not secret:
        msg = f"{name} is not configured"
        raise ConfigurationError(msg)
    if len(secret.encode("utf-8")) < MIN_SECRET_BYTES:
        msg = f"{name} must be at least {MIN_SECRET_BYTES} bytes (256 bits)"
        raise ConfigurationError(msg)
    return secret


class JWTService:
    """JWT token pair issuance and verification service.

    Usage:
        from storefront.core.container import get_token_service

        token_service = get_token_service()
        pair = token_service.issue_token_pair(
            user_id=str(user.id), email=user.email, roles=["USER"]
        )
        result = token_service.verify_access_token(pair.access_token)
    """

    def __init__(
        self,
        secret_key: str | None,
        refresh_secret_key: str | None,
        access_expiration_ms: int = DEFAULT_ACCESS_EXPIRATION_MS,
        refresh_expiration_ms: int = DEFAULT_REFRESH_EXPIRATION_MS,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Access token signing secret (>= 32 bytes).
            refresh_secret_key: Refresh token signing secret (>= 32 bytes).
            access_expiration_ms: Access token lifetime in milliseconds.
            refresh_expiration_ms: Refresh token lifetime in milliseconds.

        Raises:
            ConfigurationError: If a secret is missing or too short, or a
                lifetime is not positive.

        Note:
            Secrets come from settings, NEVER hardcoded.
        """
        self._secret_key = _check_secret(secret_key, "JWT_SECRET")
        self._refresh_secret_key = _check_secret(
            refresh_secret_key, "JWT_REFRESH_SECRET"
        )
        if access_expiration_ms <= 0 or refresh_expiration_ms <= 0:
            msg = "Token lifetimes must be positive"
            raise ConfigurationError(msg)

        self._access_expiration_ms = access_expiration_ms
        self._refresh_expiration_ms = refresh_expiration_ms
        self._algorithm = "HS512"

    @property
    def access_expiration_ms(self) -> int:
        return self._access_expiration_ms

    def issue_token_pair(
        self, user_id: str, email: str, roles: list[str]
    ) -> TokenPair:
        """Mint a new access/refresh token pair.

        Args:
            user_id: Account id (stored in 'sub' claim).
            email: Account email.
            roles: Role tags (e.g. ["USER"]).

        Returns:
            TokenPair with expires_in equal to the access lifetime in ms.

        Example:
            >>> service = JWTService("a" * 32, "r" * 32)
            >>> pair = service.issue_token_pair("42", "user@example.com", ["USER"])
            >>> len(pair.access_token.split("."))
            3
        """
        issued_at = int(datetime.now(UTC).timestamp())

        access_claims: dict[str, Any] = {
            "sub": user_id,
            "email": email,
            "roles": list(roles),
            "type": ACCESS_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + self._access_expiration_ms // 1000,
            "jti": str(uuid7()),
        }
        refresh_claims: dict[str, Any] = {
            "sub": user_id,
            "type": REFRESH_TOKEN_TYPE,
            "iat": issued_at,
            "exp": issued_at + self._refresh_expiration_ms // 1000,
            "jti": str(uuid7()),
        }

        access_token: str = jwt.encode(
            access_claims, self._secret_key, algorithm=self._algorithm
        )
        refresh_token: str = jwt.encode(
            refresh_claims, self._refresh_secret_key, algorithm=self._algorithm
        )
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=self._access_expiration_ms,
        )

    def verify_access_token(self, token: str) -> Result[TokenPayload, DomainError]:
        """Validate an access token and extract its payload.

        Returns:
            Success(TokenPayload) if valid; Failure(TOKEN_INVALID) when the
            token is empty, malformed, signed with another secret, expired,
            missing claims, or not an access token.
        """
        claims = self._decode(
            token, self._secret_key, _ACCESS_REQUIRED_CLAIMS, ACCESS_TOKEN_TYPE
        )
        if claims is None:
            return Failure(error=_invalid_token(AuthenticationError.INVALID_TOKEN))

        roles = claims["roles"]
        if not isinstance(roles, list):
            return Failure(error=_invalid_token(AuthenticationError.INVALID_TOKEN))

        return Success(
            value=TokenPayload(
                user_id=str(claims["sub"]),
                email=str(claims["email"]),
                roles=[str(role) for role in roles],
                issued_at=int(claims["iat"]),
                expires_at=int(claims["exp"]),
            )
        )

    def verify_refresh_token(
        self, token: str
    ) -> Result[RefreshPayload, DomainError]:
        """Validate a refresh token and extract its payload.

        Returns:
            Success(RefreshPayload) if valid; Failure(TOKEN_INVALID) otherwise.
        """
        claims = self._decode(
            token,
            self._refresh_secret_key,
            _REFRESH_REQUIRED_CLAIMS,
            REFRESH_TOKEN_TYPE,
        )
        if claims is None:
            return Failure(
                error=_invalid_token(AuthenticationError.INVALID_REFRESH_TOKEN)
            )

        return Success(
            value=RefreshPayload(
                user_id=str(claims["sub"]),
                token_type=REFRESH_TOKEN_TYPE,
                issued_at=int(claims["iat"]),
                expires_at=int(claims["exp"]),
            )
        )

    def get_token_expiration(self, token: str) -> datetime | None:
        """Read the exp claim WITHOUT verifying signature or expiry.

        For display and diagnostics only; never use for authorization.

        Returns:
            Expiry as an aware UTC datetime, or None if unreadable.
        """
        try:
            claims = jwt.decode(token, options={"verify_signature": False})
        except InvalidTokenError:
            return None
        exp = claims.get("exp")
        if not isinstance(exp, int | float):
            return None
        return datetime.fromtimestamp(exp, tz=UTC)

    def is_token_expired(self, token: str) -> bool:
        """True if the token's exp is in the past or cannot be read."""
        expires_at = self.get_token_expiration(token)
        if expires_at is None:
            return True
        return expires_at <= datetime.now(UTC)

    def _decode(
        self,
        token: str,
        secret: str,
        required: list[str],
        token_type: str,
    ) -> dict[str, Any] | None:
        if not token:
            return None
        try:
            # PyJWT validates signature, exp, and presence of required claims
            claims: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": required},
            )
        except InvalidTokenError:
            return None
        if claims.get("type") != token_type:
            return None
        return claims


def _invalid_token(message: str) -> DomainError:
    return DomainError(code=ErrorCode.TOKEN_INVALID, message=message)
