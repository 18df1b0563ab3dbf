"""API v1 routers.

Resources:
    /api/v1/auth     - Registration, login, token refresh, identity
    /api/v1/admin    - Operational endpoints (ADMIN only)
"""

from fastapi import APIRouter

from storefront.presentation.routers.api.v1 import admin, auth


def build_v1_router(prefix: str = "/api/v1") -> APIRouter:
    v1_router = APIRouter(prefix=prefix)
    v1_router.include_router(auth.router)
    v1_router.include_router(admin.router)
    return v1_router


__all__ = ["build_v1_router"]
