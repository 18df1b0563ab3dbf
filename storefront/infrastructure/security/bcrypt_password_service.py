"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt (cost factor 12 by default)
and the domain password strength policy.

Security:
    - Bcrypt with cost factor 12 (~250ms per hash)
    - Random salt per hash; verification is constant-time
    - Passwords shorter than 8 characters are never hashed

Note:
    bcrypt only looks at the first 72 bytes of a password. Longer inputs are
    truncated before hashing so verification stays consistent with newer
    bcrypt releases, which reject over-long input.
"""

import bcrypt

from storefront.domain.validators import MIN_PASSWORD_LENGTH, assess_password_strength
from storefront.domain.value_objects import PasswordStrength

_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from storefront.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Cost factor is logarithmic: each +1 doubles computation time.

        Raises:
            ValueError: If cost_factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).

        Raises:
            ValueError: If password is empty or shorter than 8 characters.

        Example:
            >>> service = BcryptPasswordService(cost_factor=12)
            >>> service.hash_password("SecurePass123!") != service.hash_password(
            ...     "SecurePass123!"
            ... )  # Different salts
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)
        if len(password) < MIN_PASSWORD_LENGTH:
            msg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            raise ValueError(msg)

        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise. Empty input on
            either side or a malformed hash yields False.
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError, TypeError):
            # Invalid hash format; fail closed
            return False

    def assess_strength(self, password: str) -> PasswordStrength:
        """Check a password against the strength policy.

        Returns:
            PasswordStrength listing every violated rule.
        """
        return assess_password_strength(password)
