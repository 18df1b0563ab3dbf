"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/v1/auth/register   - Create account
    POST   /api/v1/auth/login      - Authenticate, issue tokens
    POST   /api/v1/auth/refresh    - Exchange refresh token for a new pair
    GET    /api/v1/auth/me         - Current identity
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from storefront.domain.entities.user import User
from storefront.domain.value_objects import AuthenticatedIdentity, TokenPair


# =============================================================================
# Requests
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /api/v1/auth/register
    Returns: 201 Created

    Password strength is checked by the service so that every violated rule
    is reported at once.
    """

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        description="Password (8-128 chars, mixed case, number, special char)",
        examples=["SecurePass123!"],
    )
    first_name: str = Field(..., min_length=1, examples=["Ada"])
    last_name: str = Field(..., min_length=1, examples=["Lovelace"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123!",
                "first_name": "Ada",
                "last_name": "Lovelace",
            }
        }
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK
    """

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's password",
        examples=["SecurePass123!"],
    )


class RefreshTokenRequest(BaseModel):
    """Request schema for token refresh.

    POST /api/v1/auth/refresh
    Returns: 200 OK
    """

    refresh_token: str = Field(..., min_length=1, description="Refresh token")


# =============================================================================
# Responses
# =============================================================================


class UserResponse(BaseModel):
    """Public view of an account (no hash, no lockout internals)."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    roles: list[str]
    is_active: bool
    is_verified: bool
    last_login_at: datetime | None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            roles=user.role_values(),
            is_active=user.is_active,
            is_verified=user.is_verified,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


class TokenResponse(BaseModel):
    """Issued token pair."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token")
    token_type: str = Field(
        default="bearer", description="Token type for Authorization header"
    )
    expires_in: int = Field(
        ..., description="Access token lifetime in milliseconds"
    )

    @classmethod
    def from_pair(cls, pair: TokenPair) -> "TokenResponse":
        return cls(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            expires_in=pair.expires_in,
        )


class AuthData(BaseModel):
    user: UserResponse
    tokens: TokenResponse | None = None


class AuthResponse(BaseModel):
    """Envelope for register/login/refresh."""

    success: bool = True
    message: str
    data: AuthData


class IdentityResponse(BaseModel):
    """Response schema for GET /api/v1/auth/me."""

    id: str
    email: str
    roles: list[str]

    @classmethod
    def from_identity(cls, identity: AuthenticatedIdentity) -> "IdentityResponse":
        return cls(id=identity.id, email=identity.email, roles=list(identity.roles))


class AuthErrorResponse(BaseModel):
    """Error envelope.

    Attributes:
        success: Always False.
        error: Machine-readable error code (e.g. "invalid_credentials").
        message: Human-readable message.
        errors: Individual violations (weak password, request validation).
    """

    success: bool = False
    error: str
    message: str
    errors: list[str] | None = None
