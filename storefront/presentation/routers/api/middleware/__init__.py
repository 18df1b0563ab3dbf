"""Request dependencies for authentication and role checks."""

from storefront.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
    get_current_user_optional,
    require_admin,
    require_any_role,
    require_provider,
)

__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_current_user_optional",
    "require_admin",
    "require_any_role",
    "require_provider",
]
