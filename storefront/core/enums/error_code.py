"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming where it reads naturally.
Used with Result types; the presentation layer maps them to HTTP statuses.

Categories:
- Validation errors (INVALID_*, VALIDATION_*, PASSWORD_TOO_WEAK)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_INVALID)
- Account state errors (ACCOUNT_LOCKED, ACCOUNT_DEACTIVATED, EMAIL_NOT_VERIFIED)
- Authorization errors (ACCESS_DENIED, PERMISSION_DENIED)
- Availability errors (SERVICE_UNAVAILABLE)
- Encryption errors (ENCRYPTION_*, DECRYPTION_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    INVALID_INPUT = "invalid_input"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"

    # Account state errors
    ACCOUNT_LOCKED = "account_locked"
    ACCOUNT_DEACTIVATED = "account_deactivated"
    EMAIL_NOT_VERIFIED = "email_not_verified"

    # Authorization errors
    ACCESS_DENIED = "access_denied"
    PERMISSION_DENIED = "permission_denied"

    # Availability errors
    SERVICE_UNAVAILABLE = "service_unavailable"

    # Encryption errors
    ENCRYPTION_KEY_INVALID = "encryption_key_invalid"
    ENCRYPTION_FAILED = "encryption_failed"
    DECRYPTION_FAILED = "decryption_failed"
