"""Password strength report."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordStrength:
    """Outcome of a password strength assessment.

    Attributes:
        is_valid: True when no rule was violated.
        errors: Human-readable violations, in policy order.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
