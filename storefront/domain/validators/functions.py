"""Account field validators.

Validators are pure functions that raise ValueError on validation failure and
return the (normalized) value otherwise.
"""

import re

MAX_EMAIL_LENGTH = 100
MAX_NAME_LENGTH = 50

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(v: str) -> str:
    """Validate email format and length.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (stripped, lowercase).

    Raises:
        ValueError: If email is empty, malformed, or longer than 100 characters.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email format
    """
    normalized = (v or "").strip().lower()
    if not normalized or not _EMAIL_PATTERN.match(normalized):
        raise ValueError("Invalid email format")
    if len(normalized) > MAX_EMAIL_LENGTH:
        raise ValueError(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")
    return normalized


def validate_name(v: str, *, field_name: str) -> str:
    """Validate a first or last name.

    Args:
        v: Name to validate.
        field_name: Label used in the error message ("First name", ...).

    Returns:
        Name stripped of surrounding whitespace.

    Raises:
        ValueError: If blank or longer than 50 characters.
    """
    stripped = (v or "").strip()
    if not stripped:
        raise ValueError(f"{field_name} cannot be empty")
    if len(stripped) > MAX_NAME_LENGTH:
        raise ValueError(f"{field_name} cannot exceed {MAX_NAME_LENGTH} characters")
    return stripped
