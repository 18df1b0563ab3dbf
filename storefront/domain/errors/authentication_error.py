"""Authentication error messages.

Message constants paired with ErrorCode values when building DomainError
failures. These are NOT exceptions; they are the human-readable part of
Failure results returned by AuthService and the token service.

Usage:
    from storefront.domain.errors import AuthenticationError

    return Failure(
        error=DomainError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=AuthenticationError.INVALID_CREDENTIALS,
        )
    )
"""


class AuthenticationError:
    """Authentication error constants.

    Unknown email and wrong password share INVALID_CREDENTIALS so callers
    cannot probe which emails are registered.
    """

    # Credential errors
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_ALREADY_EXISTS = "User with this email already exists"
    PASSWORD_TOO_WEAK = "Password does not meet security requirements"

    # Account state errors (login denial reasons)
    ACCOUNT_DEACTIVATED = "Account is deactivated"
    EMAIL_NOT_VERIFIED = "Email not verified"
    ACCOUNT_LOCKED = "Account is temporarily locked due to failed login attempts"

    # Token errors
    INVALID_TOKEN = "Invalid or expired token"
    INVALID_REFRESH_TOKEN = "Invalid refresh token"
    ACCESS_DENIED = "User not found or access denied"

    # Administration
    USER_NOT_FOUND = "User not found"

    # Dependencies
    SERVICE_UNAVAILABLE = "Authentication service temporarily unavailable"
