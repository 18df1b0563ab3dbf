"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol

from storefront.domain.value_objects import PasswordStrength


class PasswordHashingProtocol(Protocol):
    """Password hashing, verification and strength assessment interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self.password_service = password_service

        strength = self.password_service.assess_strength("SecurePass123!")
        password_hash = self.password_service.hash_password("SecurePass123!")
        ok = self.password_service.verify_password("SecurePass123!", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash (at least 8 characters).

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).

        Raises:
            ValueError: If password is empty or shorter than 8 characters.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise. Never raises;
            empty input or a malformed hash yields False.
        """
        ...

    def assess_strength(self, password: str) -> PasswordStrength:
        """Check a password against the strength policy.

        Returns:
            PasswordStrength listing every violated rule.
        """
        ...
