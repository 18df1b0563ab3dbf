"""Auth resource router.

Endpoints:
    POST   /api/v1/auth/register   - Create account (201)
    POST   /api/v1/auth/login      - Authenticate, issue tokens
    POST   /api/v1/auth/refresh    - Exchange refresh token for a new pair
    GET    /api/v1/auth/me         - Current identity
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront.application.services import AuthResult, AuthService
from storefront.core.container import get_auth_service
from storefront.core.result import Failure, Success
from storefront.presentation.routers.api.middleware import (
    CurrentUser,
    get_current_user,
)
from storefront.presentation.routers.api.v1.errors import error_response
from storefront.schemas.auth_schemas import (
    AuthData,
    AuthErrorResponse,
    AuthResponse,
    IdentityResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def _auth_response(result: AuthResult, message: str) -> AuthResponse:
    return AuthResponse(
        message=message,
        data=AuthData(
            user=UserResponse.from_entity(result.user),
            tokens=(
                TokenResponse.from_pair(result.tokens)
                if result.tokens is not None
                else None
            ),
        ),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses={
        400: {"description": "Weak password or invalid input", "model": AuthErrorResponse},
        409: {"description": "Email already registered", "model": AuthErrorResponse},
        503: {"description": "Account store unavailable", "model": AuthErrorResponse},
    },
    summary="Register",
)
async def register(
    data: RegisterRequest, auth_service: AuthServiceDep
) -> AuthResponse | JSONResponse:
    """Create an account with role USER.

    POST /api/v1/auth/register → 201 Created
    """
    result = await auth_service.register(
        email=str(data.email),
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    match result:
        case Failure(error=error):
            return error_response(error)
        case Success(value=auth):
            return _auth_response(
                auth, "User registered successfully. You can now login."
            )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        401: {"description": "Invalid credentials", "model": AuthErrorResponse},
        403: {"description": "Deactivated or unverified", "model": AuthErrorResponse},
        423: {"description": "Account locked", "model": AuthErrorResponse},
        503: {"description": "Account store unavailable", "model": AuthErrorResponse},
    },
    summary="Login",
)
async def login(
    data: LoginRequest, auth_service: AuthServiceDep
) -> AuthResponse | JSONResponse:
    """Authenticate and issue a token pair.

    POST /api/v1/auth/login → 200 OK
    """
    match await auth_service.login(str(data.email), data.password):
        case Failure(error=error):
            return error_response(error)
        case Success(value=auth):
            return _auth_response(auth, "Login successful")


@router.post(
    "/refresh",
    response_model=AuthResponse,
    responses={
        401: {"description": "Invalid refresh token", "model": AuthErrorResponse},
        503: {"description": "Account store unavailable", "model": AuthErrorResponse},
    },
    summary="Refresh tokens",
)
async def refresh(
    data: RefreshTokenRequest, auth_service: AuthServiceDep
) -> AuthResponse | JSONResponse:
    """POST /api/v1/auth/refresh → 200 OK with a new pair."""
    match await auth_service.refresh_token(data.refresh_token):
        case Failure(error=error):
            return error_response(error)
        case Success(value=auth):
            return _auth_response(auth, "Token refreshed successfully")


@router.get("/me", response_model=IdentityResponse, summary="Current identity")
async def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> IdentityResponse:
    return IdentityResponse.from_identity(current_user)
