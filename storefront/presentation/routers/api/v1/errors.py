"""Error responses for the v1 API.

Maps DomainError codes to HTTP statuses and renders AuthErrorResponse
bodies. No internals (exception text, stack traces) are ever included.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, WeakPasswordError
from storefront.schemas.auth_schemas import AuthErrorResponse

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCESS_DENIED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_DEACTIVATED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EMAIL_NOT_VERIFIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.ACCOUNT_LOCKED: status.HTTP_423_LOCKED,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PASSWORD_TOO_WEAK: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> JSONResponse:
    """Render a DomainError as an AuthErrorResponse."""
    status_code = ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST)
    violations = error.violations if isinstance(error, WeakPasswordError) else None
    return JSONResponse(
        status_code=status_code,
        content=AuthErrorResponse(
            error=error.code.value,
            message=error.message,
            errors=violations,
        ).model_dump(),
    )


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        f"{'.'.join(str(part) for part in err['loc'][1:])}: {err['msg']}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=AuthErrorResponse(
            error=ErrorCode.VALIDATION_FAILED.value,
            message="Request validation failed",
            errors=errors,
        ).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install API-wide exception handlers."""
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
