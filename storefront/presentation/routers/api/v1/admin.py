"""Admin router (ADMIN role only).

Endpoints:
    GET    /api/v1/admin/circuit-breakers         - Breaker metrics
    POST   /api/v1/admin/users/{user_id}/unlock   - Clear account lockout
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.application.services import AuthService
from storefront.core.container import get_auth_service, get_circuit_breaker_registry
from storefront.core.result import Failure, Success
from storefront.infrastructure.resilience import CircuitBreakerRegistry
from storefront.presentation.routers.api.middleware import require_admin
from storefront.presentation.routers.api.v1.errors import error_response
from storefront.schemas.auth_schemas import AuthErrorResponse, UserResponse
from storefront.schemas.resilience_schemas import (
    CircuitBreakerListResponse,
    CircuitBreakerMetricsResponse,
)

router = APIRouter(
    prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)]
)


@router.get(
    "/circuit-breakers",
    response_model=CircuitBreakerListResponse,
    summary="Circuit breaker metrics",
)
async def list_circuit_breakers(
    registry: Annotated[CircuitBreakerRegistry, Depends(get_circuit_breaker_registry)],
) -> CircuitBreakerListResponse:
    now = registry.clock()
    return CircuitBreakerListResponse(
        data=[
            CircuitBreakerMetricsResponse.from_metrics(metrics, now)
            for metrics in registry.get_all_metrics().values()
        ]
    )


@router.post(
    "/users/{user_id}/unlock",
    response_model=UserResponse,
    responses={404: {"description": "User not found", "model": AuthErrorResponse}},
    summary="Unlock account",
)
async def unlock_user(
    user_id: UUID,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserResponse | JSONResponse:
    match await auth_service.unlock_account(user_id):
        case Failure(error=error):
            return error_response(error)
        case Success(value=user):
            return UserResponse.from_entity(user)
