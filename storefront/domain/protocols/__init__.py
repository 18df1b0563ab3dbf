"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from storefront.domain.protocols import PasswordHashingProtocol, UserRepository
"""

from storefront.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
    EncryptionProtocol,
    SerializationError,
)
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from storefront.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
)
from storefront.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EncryptionProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "UserRepository",
    # Encryption errors
    "DecryptionError",
    "EncryptionError",
    "EncryptionKeyError",
    "SerializationError",
]
