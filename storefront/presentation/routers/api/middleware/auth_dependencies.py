"""Bearer token authentication dependencies.

FastAPI dependencies that resolve the Authorization header to the identity
behind it. Verification goes through AuthService, so a token belonging to an
account that was since deactivated or locked is rejected.

Usage:
    # Protected route (requires auth)
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": current_user.id}

    # Role-restricted route
    @router.get("/admin-only", dependencies=[Depends(require_admin)])
    async def admin_route(): ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.application.services import AuthService
from storefront.core.container import get_auth_service
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Success
from storefront.domain.enums import UserRole
from storefront.domain.value_objects import AuthenticatedIdentity

# Missing credentials are turned into 401 here rather than by HTTPBearer
bearer_scheme = HTTPBearer(auto_error=False)

CurrentUser = AuthenticatedIdentity

INSUFFICIENT_PERMISSIONS = "Insufficient permissions"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> CurrentUser:
    """Get current authenticated user from the bearer token.

    Returns:
        CurrentUser (AuthenticatedIdentity) for a valid token of an account
        that can still login.

    Raises:
        HTTPException 401: Token missing, invalid, expired, or account gone.
        HTTPException 503: Account store unavailable.
    """
    if credentials is None:
        raise _unauthorized("Access token is required")

    match await auth_service.verify_access_token(credentials.credentials):
        case Success(value=identity):
            return identity
        case Failure(error=error) if error.code is ErrorCode.SERVICE_UNAVAILABLE:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=error.message,
            )
        case Failure(error=error):
            raise _unauthorized(error.message)


async def get_current_user_optional(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> CurrentUser | None:
    """Get current user if authenticated, None otherwise.

    Never raises for missing or invalid tokens.
    """
    if credentials is None:
        return None

    match await auth_service.verify_access_token(credentials.credentials):
        case Success(value=identity):
            return identity
        case _:
            return None


def require_any_role(
    *roles: UserRole,
) -> Callable[[CurrentUser], Awaitable[CurrentUser]]:
    """Build a dependency that admits users holding at least one role.

    Args:
        *roles: Accepted roles.

    Returns:
        Dependency returning the CurrentUser, or raising 403.

    Usage:
        @router.get("/catalog/manage")
        async def manage(
            user: CurrentUser = Depends(
                require_any_role(UserRole.PROVIDER, UserRole.ADMIN)
            ),
        ): ...
    """
    required = frozenset(role.value for role in roles)

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not current_user.has_any_role(required):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=INSUFFICIENT_PERMISSIONS,
            )
        return current_user

    return role_checker


require_admin = require_any_role(UserRole.ADMIN)
require_provider = require_any_role(UserRole.PROVIDER, UserRole.ADMIN)
