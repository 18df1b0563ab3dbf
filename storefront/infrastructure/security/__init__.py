"""Security adapters: password hashing, token signing, at-rest encryption."""

from storefront.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from storefront.infrastructure.security.encryption_service import EncryptionService
from storefront.infrastructure.security.jwt_service import JWTService

__all__ = ["BcryptPasswordService", "EncryptionService", "JWTService"]
