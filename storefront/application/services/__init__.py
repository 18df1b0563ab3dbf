"""Application services."""

from storefront.application.services.auth_service import (
    AuthenticatedIdentity,
    AuthResult,
    AuthService,
)

__all__ = ["AuthResult", "AuthService", "AuthenticatedIdentity"]
