"""Validation functions for the authentication domain.

Pure functions; email validation raises ValueError, password strength returns
a report listing every violated rule.
"""

from storefront.domain.validators.functions import validate_email, validate_name
from storefront.domain.validators.password_strength import (
    COMMON_WEAK_PASSWORDS,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    PASSWORD_SYMBOLS,
    assess_password_strength,
)

__all__ = [
    "COMMON_WEAK_PASSWORDS",
    "MAX_PASSWORD_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "PASSWORD_SYMBOLS",
    "assess_password_strength",
    "validate_email",
    "validate_name",
]
