"""
Main FastAPI application entry point.

The app is built by ``create_app()``; the module-level ``app`` is what
``uvicorn storefront.main:app`` serves. Missing signing secrets surface as
ConfigurationError at startup, before the first request.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.core.config import get_settings
from storefront.presentation.routers.api.v1 import build_v1_router
from storefront.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: build the auth service so configuration errors fail fast.
    """
    from storefront.core.container import get_auth_service, get_logger

    get_auth_service()
    get_logger().info("application_started")

    yield


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings."""
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        description="Storefront authentication and account security API",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_exception_handlers(application)
    application.include_router(build_v1_router(settings.api_v1_prefix))

    @application.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint for monitoring and load balancers."""
        return {"status": "healthy"}

    return application


app = create_app()
