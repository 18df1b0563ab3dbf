"""Encryption service for auxiliary at-rest data.

AES-256-GCM encryption for small sensitive payloads (text or JSON objects)
plus SHA-256 helpers for integrity hashing.

Security Properties:
    - Confidentiality: Only holder of key can decrypt
    - Integrity: Tampering is detected via GCM authentication tag
    - Uniqueness: Random IV per encryption prevents pattern analysis

Architecture:
    - Infrastructure adapter (catches cryptography exceptions)
    - Returns Result types (railway-oriented programming)
"""

import hashlib
import hmac
import json
import os
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
    SerializationError,
)

KEY_SIZE = 32


class EncryptionService:
    """AES-256-GCM encryption service.

    Format:
        Encrypted bytes = IV (12 bytes) || ciphertext || auth_tag (16 bytes)

    Usage:
        >>> match EncryptionService.create(get_settings().aes_secret_key):
        ...     case Success(value=svc):
        ...         result = svc.encrypt_text("4111 1111 1111 1111")
        ...     case Failure(error=error):
        ...         ...
    """

    IV_SIZE = 12  # 96 bits - NIST recommended for GCM
    MIN_ENCRYPTED_SIZE = 12 + 16  # IV + auth tag

    def __init__(self, aesgcm: AESGCM) -> None:
        """Initialize with pre-validated AESGCM instance.

        Use EncryptionService.create() factory instead of direct construction.
        """
        self._aesgcm = aesgcm

    @classmethod
    def create(
        cls, key: str | bytes | None
    ) -> Result["EncryptionService", EncryptionKeyError]:
        """Create encryption service with validated key.

        Args:
            key: 32-byte key. Strings are UTF-8 encoded first, so a
                32-character ASCII string is accepted.

        Returns:
            Success(EncryptionService) if key is valid.
            Failure(EncryptionKeyError) if key is missing or the wrong length.
        """
        if not key:
            return Failure(
                error=EncryptionKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message="Encryption key is not configured",
                )
            )

        raw = key.encode("utf-8") if isinstance(key, str) else key
        if len(raw) != KEY_SIZE:
            return Failure(
                error=EncryptionKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message=(
                        f"Encryption key must be exactly {KEY_SIZE} bytes, "
                        f"got {len(raw)} bytes"
                    ),
                    details={
                        "expected_length": str(KEY_SIZE),
                        "actual_length": str(len(raw)),
                    },
                )
            )

        return Success(value=cls(AESGCM(raw)))

    def encrypt_text(self, plaintext: str) -> Result[bytes, EncryptionError]:
        """Encrypt a string.

        Returns:
            Success(bytes) in IV || ciphertext || tag format.
        """
        return self._seal(plaintext.encode("utf-8"))

    def decrypt_text(self, encrypted: bytes) -> Result[str, EncryptionError]:
        """Decrypt bytes produced by encrypt_text().

        Returns:
            Success(str) with the original text.
            Failure(DecryptionError) on wrong key, tampering, or short input.
        """
        match self._open(encrypted):
            case Failure() as failure:
                return failure
            case Success(value=plaintext):
                pass

        try:
            return Success(value=plaintext.decode("utf-8"))
        except UnicodeDecodeError as e:
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Decrypted data is not valid UTF-8: {e}",
                )
            )

    def encrypt(self, data: dict[str, Any]) -> Result[bytes, EncryptionError]:
        """Encrypt a JSON-serializable dictionary.

        Returns:
            Success(bytes) with encrypted data.
            Failure(SerializationError) if data cannot be serialized.
        """
        try:
            plaintext = json.dumps(data, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Failed to serialize data to JSON: {e}",
                )
            )
        return self._seal(plaintext)

    def decrypt(self, encrypted: bytes) -> Result[dict[str, Any], EncryptionError]:
        """Decrypt bytes produced by encrypt() back to a dictionary.

        Returns:
            Success(dict) with original dictionary.
            Failure(DecryptionError) if decryption fails (wrong key, tampered).
            Failure(SerializationError) if decrypted data is not a JSON object.
        """
        match self._open(encrypted):
            case Failure() as failure:
                return failure
            case Success(value=plaintext):
                pass

        try:
            data = json.loads(plaintext.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Failed to deserialize decrypted data: {e}",
                )
            )
        if not isinstance(data, dict):
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="Decrypted data is not a JSON object",
                )
            )
        return Success(value=data)

    @staticmethod
    def hash_data(data: str) -> str:
        """SHA-256 hex digest of a string.

        Raises:
            ValueError: If data is empty.
        """
        if not data:
            msg = "Data to hash cannot be empty"
            raise ValueError(msg)
        return hashlib.sha256(data.encode("utf-8")).hexdigest()

    @staticmethod
    def verify_hash(data: str, expected_hash: str) -> bool:
        """Constant-time check of data against a SHA-256 hex digest.

        Returns:
            False on empty input on either side.
        """
        if not data or not expected_hash:
            return False
        actual = hashlib.sha256(data.encode("utf-8")).hexdigest()
        return hmac.compare_digest(actual, expected_hash.lower())

    def _seal(self, plaintext: bytes) -> Result[bytes, EncryptionError]:
        iv = os.urandom(self.IV_SIZE)
        try:
            ciphertext = self._aesgcm.encrypt(iv, plaintext, associated_data=None)
        except OverflowError as e:
            return Failure(
                error=EncryptionError(
                    code=ErrorCode.ENCRYPTION_FAILED,
                    message=f"Encryption failed: {e}",
                )
            )
        return Success(value=iv + ciphertext)

    def _open(self, encrypted: bytes) -> Result[bytes, EncryptionError]:
        if len(encrypted) < self.MIN_ENCRYPTED_SIZE:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.INVALID_INPUT,
                    message=(
                        f"Encrypted data too short: {len(encrypted)} bytes "
                        f"(minimum {self.MIN_ENCRYPTED_SIZE} bytes)"
                    ),
                    details={
                        "actual_length": str(len(encrypted)),
                        "minimum_length": str(self.MIN_ENCRYPTED_SIZE),
                    },
                )
            )

        iv = encrypted[: self.IV_SIZE]
        ciphertext = encrypted[self.IV_SIZE :]
        try:
            return Success(value=self._aesgcm.decrypt(iv, ciphertext, None))
        except InvalidTag:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message="Failed to decrypt data: invalid key or tampered data",
                )
            )
