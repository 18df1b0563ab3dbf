"""Integration tests for EncryptionService using real AES-256-GCM."""

import pytest

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Success
from storefront.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionKeyError,
    SerializationError,
)
from storefront.infrastructure.security import EncryptionService

KEY = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def encryption_service():
    result = EncryptionService.create(KEY)
    assert isinstance(result, Success)
    return result.value


@pytest.mark.integration
class TestEncryptionServiceCreate:
    @pytest.mark.parametrize("key", [None, "", "too-short", "x" * 33])
    def test_invalid_keys_rejected(self, key):
        result = EncryptionService.create(key)

        assert isinstance(result, Failure)
        assert isinstance(result.error, EncryptionKeyError)
        assert result.error.code == ErrorCode.ENCRYPTION_KEY_INVALID

    def test_bytes_key_accepted(self):
        assert isinstance(EncryptionService.create(b"k" * 32), Success)


@pytest.mark.integration
class TestEncryptionServiceText:
    def test_text_round_trip(self, encryption_service):
        encrypted = encryption_service.encrypt_text("4111 1111 1111 1111").value

        assert b"4111" not in encrypted
        assert encryption_service.decrypt_text(encrypted).value == "4111 1111 1111 1111"

    def test_random_iv_per_encryption(self, encryption_service):
        first = encryption_service.encrypt_text("same").value
        second = encryption_service.encrypt_text("same").value

        assert first[:12] != second[:12]
        assert first != second

    def test_tampered_ciphertext_rejected(self, encryption_service):
        encrypted = bytearray(encryption_service.encrypt_text("secret").value)
        encrypted[-1] ^= 0x01

        result = encryption_service.decrypt_text(bytes(encrypted))

        assert isinstance(result.error, DecryptionError)
        assert result.error.code == ErrorCode.DECRYPTION_FAILED

    def test_wrong_key_rejected(self, encryption_service):
        other = EncryptionService.create("f" * 32).value
        encrypted = other.encrypt_text("secret").value

        assert isinstance(encryption_service.decrypt_text(encrypted), Failure)

    def test_short_input_rejected(self, encryption_service):
        result = encryption_service.decrypt_text(b"short")

        assert result.error.code == ErrorCode.INVALID_INPUT


@pytest.mark.integration
class TestEncryptionServiceDict:
    def test_dict_round_trip(self, encryption_service):
        data = {"card_last4": "1111", "expiry": "12/30", "nested": {"a": [1, 2]}}

        encrypted = encryption_service.encrypt(data).value

        assert encryption_service.decrypt(encrypted).value == data

    def test_unserializable_dict_rejected(self, encryption_service):
        result = encryption_service.encrypt({"value": object()})

        assert isinstance(result.error, SerializationError)

    def test_non_object_payload_rejected(self, encryption_service):
        encrypted = encryption_service.encrypt_text("[1, 2, 3]").value

        result = encryption_service.decrypt(encrypted)

        assert isinstance(result.error, SerializationError)


@pytest.mark.integration
class TestEncryptionServiceHashing:
    def test_hash_and_verify(self):
        digest = EncryptionService.hash_data("payload")

        assert len(digest) == 64
        assert EncryptionService.verify_hash("payload", digest) is True
        assert EncryptionService.verify_hash("payload", digest.upper()) is True
        assert EncryptionService.verify_hash("other", digest) is False

    def test_hash_empty_rejected(self):
        with pytest.raises(ValueError):
            EncryptionService.hash_data("")

    def test_verify_empty_is_false(self):
        assert EncryptionService.verify_hash("", "abc") is False
