"""Encryption protocol for auxiliary at-rest data.

Defines the port for symmetric encryption of small payloads (text or
JSON-serializable dicts). Infrastructure implements AES-256-GCM.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result


# =============================================================================
# Encryption Error Types (Domain Layer)
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionError(DomainError):
    """Base encryption error.

    Does NOT inherit from Exception - used in Result types.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionKeyError(EncryptionError):
    """Invalid encryption key (wrong length)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DecryptionError(EncryptionError):
    """Decryption failure.

    Occurs when:
    - Wrong encryption key
    - Data has been tampered with
    - Invalid encrypted data format
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class SerializationError(EncryptionError):
    """Data cannot be serialized to JSON, or decrypted data is not JSON."""

    pass


# =============================================================================
# Encryption Protocol (Port)
# =============================================================================


class EncryptionProtocol(Protocol):
    """Protocol for encryption/decryption operations."""

    def encrypt_text(self, plaintext: str) -> Result[bytes, EncryptionError]:
        """Encrypt a string."""
        ...

    def decrypt_text(self, encrypted: bytes) -> Result[str, EncryptionError]:
        """Decrypt bytes produced by encrypt_text()."""
        ...

    def encrypt(self, data: dict[str, Any]) -> Result[bytes, EncryptionError]:
        """Encrypt a JSON-serializable dictionary."""
        ...

    def decrypt(self, encrypted: bytes) -> Result[dict[str, Any], EncryptionError]:
        """Decrypt bytes produced by encrypt() back to a dictionary."""
        ...
