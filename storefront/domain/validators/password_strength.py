"""Password strength policy.

Rules:
    - Length between 8 and 128 characters
    - At least one lowercase letter, one uppercase letter, one digit
    - At least one symbol from PASSWORD_SYMBOLS
    - Not one of COMMON_WEAK_PASSWORDS (case-insensitive exact match)

Every violated rule is reported, not only the first one, so registration
forms can show the full list at once.
"""

import re

from storefront.domain.value_objects.password_strength import PasswordStrength

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

COMMON_WEAK_PASSWORDS = frozenset(
    {
        "password",
        "123456",
        "12345678",
        "qwerty",
        "abc123",
        "password123",
        "admin",
        "letmein",
        "welcome",
        "monkey",
    }
)


def assess_password_strength(password: str) -> PasswordStrength:
    """Check a password against every strength rule.

    Args:
        password: Plaintext candidate password.

    Returns:
        PasswordStrength with is_valid and the list of violations.

    Example:
        >>> assess_password_strength("weak").errors
        ['Password must be at least 8 characters long',
         'Password must contain at least one uppercase letter',
         'Password must contain at least one number',
         'Password must contain at least one special character']
    """
    if not password:
        return PasswordStrength(is_valid=False, errors=["Password is required"])

    errors: list[str] = []

    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if len(password) > MAX_PASSWORD_LENGTH:
        errors.append(f"Password cannot exceed {MAX_PASSWORD_LENGTH} characters")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")
    if not any(c in PASSWORD_SYMBOLS for c in password):
        errors.append("Password must contain at least one special character")
    if password.lower() in COMMON_WEAK_PASSWORDS:
        errors.append("Password is too common and weak")

    return PasswordStrength(is_valid=not errors, errors=errors)
