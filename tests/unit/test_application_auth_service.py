"""Unit tests for AuthService.

Tests cover:
- Login: success, unknown email, wrong password, account state denials
- Login: denial checked before password, lockout on 5th failure
- Registration: validation order, duplicate email, weak password
- Token refresh and access token verification
- Administrative unlock
- Store failures surfaced as SERVICE_UNAVAILABLE

Architecture:
- Unit tests for application service (mocked dependencies)
- Mock repository, hasher and token service protocols
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from storefront.application.services import AuthResult, AuthService
from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthenticationError, WeakPasswordError
from storefront.core.result import Failure, Success
from storefront.domain.errors import DuplicateEmailError
from storefront.domain.value_objects import (
    PasswordStrength,
    RefreshPayload,
    TokenPair,
    TokenPayload,
)
from storefront.infrastructure.resilience import CircuitOpenError
from tests.utils.factories import STRONG_PASSWORD, create_user

TOKENS = TokenPair(access_token="access", refresh_token="refresh", expires_in=3_600_000)


async def _assign_id(user):
    if user.id is None:
        user.id = uuid4()
    return user


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.find_by_id.return_value = None
    repo.save.side_effect = _assign_id
    return repo


@pytest.fixture
def password_service():
    service = Mock()
    service.verify_password.return_value = True
    service.hash_password.return_value = "$2b$12$hashed"
    service.assess_strength.return_value = PasswordStrength(is_valid=True, errors=[])
    return service


@pytest.fixture
def token_service():
    service = Mock()
    service.issue_token_pair.return_value = TOKENS
    return service


@pytest.fixture
def service(user_repo, password_service, token_service, mock_logger):
    return AuthService(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestLogin:
    """Test login scenarios."""

    @pytest.mark.asyncio
    async def test_login_success_returns_tokens(
        self, service, user_repo, token_service
    ):
        """Test successful login resets state and issues a token pair."""
        # Arrange
        user = create_user(id=uuid4(), failed_login_attempts=2)
        user_repo.find_by_email.return_value = user

        # Act
        result = await service.login("User@Example.com ", STRONG_PASSWORD)

        # Assert
        assert isinstance(result, Success)
        assert isinstance(result.value, AuthResult)
        assert result.value.tokens == TOKENS
        assert user.failed_login_attempts == 0
        assert user.last_login_at is not None
        user_repo.find_by_email.assert_awaited_once_with("user@example.com")
        user_repo.save.assert_awaited_once_with(user)
        token_service.issue_token_pair.assert_called_once_with(
            user_id=str(user.id), email="user@example.com", roles=["USER"]
        )

    @pytest.mark.asyncio
    async def test_unknown_email_returns_invalid_credentials(self, service):
        result = await service.login("nobody@example.com", STRONG_PASSWORD)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_wrong_password_records_failure(
        self, service, user_repo, password_service
    ):
        # Arrange
        user = create_user(id=uuid4())
        user_repo.find_by_email.return_value = user
        password_service.verify_password.return_value = False

        # Act
        result = await service.login("user@example.com", "WrongPass123!")

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert user.failed_login_attempts == 1
        user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_fifth_wrong_password_locks_account(
        self, service, user_repo, password_service, mock_logger
    ):
        # Arrange
        user = create_user(id=uuid4(), failed_login_attempts=4)
        user_repo.find_by_email.return_value = user
        password_service.verify_password.return_value = False

        # Act
        result = await service.login("user@example.com", "WrongPass123!")

        # Assert
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert user.is_locked() is True
        events = [call.args[0] for call in mock_logger.warning.call_args_list]
        assert "account_locked" in events

    @pytest.mark.asyncio
    async def test_locked_account_rejected_before_password_check(
        self, service, user_repo, password_service
    ):
        """Test a locked account is refused even with the correct password."""
        # Arrange
        user = create_user(
            id=uuid4(),
            failed_login_attempts=5,
            locked_until=datetime.now(UTC) + timedelta(minutes=10),
        )
        user_repo.find_by_email.return_value = user

        # Act
        result = await service.login("user@example.com", STRONG_PASSWORD)

        # Assert
        assert result.error.code == ErrorCode.ACCOUNT_LOCKED
        assert result.error.message == (
            "Account is temporarily locked due to failed login attempts"
        )
        password_service.verify_password.assert_not_called()
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "code"),
        [
            ({"is_active": False}, ErrorCode.ACCOUNT_DEACTIVATED),
            ({"is_verified": False}, ErrorCode.EMAIL_NOT_VERIFIED),
        ],
    )
    async def test_account_state_denials(self, service, user_repo, overrides, code):
        user_repo.find_by_email.return_value = create_user(id=uuid4(), **overrides)

        result = await service.login("user@example.com", STRONG_PASSWORD)

        assert isinstance(result, Failure)
        assert result.error.code == code

    @pytest.mark.asyncio
    async def test_store_failure_returns_service_unavailable(self, service, user_repo):
        user_repo.find_by_email.side_effect = CircuitOpenError("account-store", 30.0)

        result = await service.login("user@example.com", STRONG_PASSWORD)

        assert result.error.code == ErrorCode.SERVICE_UNAVAILABLE
        assert result.error.message == "Authentication service temporarily unavailable"


@pytest.mark.unit
class TestRegister:
    """Test registration scenarios."""

    @pytest.mark.asyncio
    async def test_register_success(self, service, user_repo, password_service):
        # Act
        result = await service.register(
            "New@Example.com", STRONG_PASSWORD, "Grace", "Hopper"
        )

        # Assert
        assert isinstance(result, Success)
        user = result.value.user
        assert user.id is not None
        assert user.email == "new@example.com"
        assert user.password_hash == "$2b$12$hashed"
        assert user.role_values() == ["USER"]
        assert user.is_verified is True
        assert result.value.tokens is None
        password_service.hash_password.assert_called_once_with(STRONG_PASSWORD)

    @pytest.mark.asyncio
    async def test_register_can_issue_tokens(self, service):
        result = await service.register(
            "new@example.com", STRONG_PASSWORD, "Grace", "Hopper", issue_tokens=True
        )

        assert result.value.tokens == TOKENS

    @pytest.mark.asyncio
    async def test_invalid_email_checked_first(self, service, user_repo):
        result = await service.register("invalid", "weak", "", "")

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "email"
        user_repo.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_email_checked_before_strength(
        self, service, user_repo, password_service
    ):
        user_repo.find_by_email.return_value = create_user(id=uuid4())

        result = await service.register("user@example.com", "weak", "Ada", "L")

        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert result.error.message == "User with this email already exists"
        password_service.assess_strength.assert_not_called()

    @pytest.mark.asyncio
    async def test_weak_password_reports_every_violation(
        self, service, user_repo, password_service
    ):
        # Arrange
        violations = [
            "Password must be at least 8 characters long",
            "Password must contain at least one number",
        ]
        password_service.assess_strength.return_value = PasswordStrength(
            is_valid=False, errors=violations
        )

        # Act
        result = await service.register("new@example.com", "weak", "Ada", "L")

        # Assert
        assert isinstance(result.error, WeakPasswordError)
        assert result.error.code == ErrorCode.PASSWORD_TOO_WEAK
        assert result.error.violations == violations
        assert result.error.message == ", ".join(violations)
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, service, user_repo):
        result = await service.register("new@example.com", STRONG_PASSWORD, " ", "L")

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert "First name" in result.error.message
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_returns_service_unavailable(self, service, user_repo):
        user_repo.save.side_effect = ConnectionError("down")

        result = await service.register(
            "new@example.com", STRONG_PASSWORD, "Grace", "Hopper"
        )

        assert result.error.code == ErrorCode.SERVICE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_duplicate_on_save_returns_email_already_exists(
        self, service, user_repo
    ):
        user_repo.save.side_effect = DuplicateEmailError("new@example.com")

        result = await service.register(
            "new@example.com", STRONG_PASSWORD, "Grace", "Hopper"
        )

        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert result.error.conflicting_field == "email"

    @pytest.mark.asyncio
    async def test_hashing_error_not_reported_as_store_failure(
        self, service, user_repo, password_service
    ):
        password_service.hash_password.side_effect = ValueError("bad cost")

        with pytest.raises(ValueError, match="bad cost"):
            await service.register("new@example.com", STRONG_PASSWORD, "Grace", "Hopper")

        user_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestTokens:
    """Test refresh and access token verification."""

    @pytest.mark.asyncio
    async def test_refresh_issues_new_pair(self, service, user_repo, token_service):
        # Arrange
        user = create_user(id=uuid4())
        user_repo.find_by_id.return_value = user
        token_service.verify_refresh_token.return_value = Success(
            value=RefreshPayload(
                user_id=str(user.id), token_type="refresh", issued_at=0, expires_at=1
            )
        )

        # Act
        result = await service.refresh_token("refresh")

        # Assert
        assert result.value.tokens == TOKENS
        user_repo.find_by_id.assert_awaited_once_with(user.id)

    @pytest.mark.asyncio
    async def test_refresh_with_invalid_token(self, service, token_service):
        error = AuthenticationError(
            code=ErrorCode.TOKEN_INVALID, message="Invalid refresh token"
        )
        token_service.verify_refresh_token.return_value = Failure(error=error)

        result = await service.refresh_token("garbage")

        assert result.error is error

    @pytest.mark.asyncio
    async def test_refresh_for_deactivated_user_denied(
        self, service, user_repo, token_service
    ):
        user = create_user(id=uuid4(), is_active=False)
        user_repo.find_by_id.return_value = user
        token_service.verify_refresh_token.return_value = Success(
            value=RefreshPayload(
                user_id=str(user.id), token_type="refresh", issued_at=0, expires_at=1
            )
        )

        result = await service.refresh_token("refresh")

        assert result.error.code == ErrorCode.ACCESS_DENIED
        assert result.error.message == "User not found or access denied"

    @pytest.mark.asyncio
    async def test_verify_access_token_returns_identity(
        self, service, user_repo, token_service
    ):
        user = create_user(id=uuid4())
        user_repo.find_by_id.return_value = user
        token_service.verify_access_token.return_value = Success(
            value=TokenPayload(
                user_id=str(user.id),
                email=user.email,
                roles=["USER", "ADMIN"],
                issued_at=0,
                expires_at=1,
            )
        )

        result = await service.verify_access_token("access")

        identity = result.value
        assert identity.id == str(user.id)
        assert identity.email == "user@example.com"
        assert identity.roles == ["USER", "ADMIN"]

    @pytest.mark.asyncio
    async def test_verify_access_token_with_malformed_subject(
        self, service, token_service
    ):
        token_service.verify_access_token.return_value = Success(
            value=TokenPayload(
                user_id="not-a-uuid",
                email="user@example.com",
                roles=["USER"],
                issued_at=0,
                expires_at=1,
            )
        )

        result = await service.verify_access_token("access")

        assert result.error.code == ErrorCode.ACCESS_DENIED

    @pytest.mark.asyncio
    async def test_verify_access_token_store_failure(
        self, service, user_repo, token_service
    ):
        token_service.verify_access_token.return_value = Success(
            value=TokenPayload(
                user_id=str(uuid4()),
                email="user@example.com",
                roles=["USER"],
                issued_at=0,
                expires_at=1,
            )
        )
        user_repo.find_by_id.side_effect = ConnectionError("down")

        result = await service.verify_access_token("access")

        assert result.error.code == ErrorCode.SERVICE_UNAVAILABLE


@pytest.mark.unit
class TestUnlockAccount:
    @pytest.mark.asyncio
    async def test_unlock_clears_lockout(self, service, user_repo):
        user = create_user(
            id=uuid4(),
            failed_login_attempts=5,
            locked_until=datetime.now(UTC) + timedelta(minutes=10),
        )
        user_repo.find_by_id.return_value = user

        result = await service.unlock_account(user.id)

        assert result.value.locked_until is None
        assert result.value.failed_login_attempts == 0
        user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_unlock_unknown_user(self, service):
        result = await service.unlock_account(uuid4())

        assert result.error.code == ErrorCode.USER_NOT_FOUND
