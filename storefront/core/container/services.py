"""Application service factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from storefront.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_token_service,
)
from storefront.core.container.repositories import get_user_repository

if TYPE_CHECKING:
    from storefront.application.services import AuthService


@lru_cache()
def get_auth_service() -> "AuthService":
    """Get AuthService singleton wired with the container's adapters."""
    from storefront.application.services import AuthService

    return AuthService(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger().bind(component="auth_service"),
    )
