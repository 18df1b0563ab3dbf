"""Unit tests for User domain entity.

Tests cover:
- Lockout state machine (5 failures, 30 minutes, no extension, lazy expiry)
- Successful login reset and first-login detection
- Login denial order (deactivated, unverified, locked)
- Invariant validation on construction and mutation
- Role management and account administration
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from freezegun import freeze_time

from storefront.domain.entities.user import (
    LOCKOUT_DURATION,
    MAX_FAILED_LOGIN_ATTEMPTS,
)
from storefront.domain.enums import UserRole
from storefront.domain.errors import AuthenticationError
from tests.utils.factories import create_user


@pytest.mark.unit
class TestUserLockout:
    """Test failed login counting and account lockout."""

    def test_new_user_is_not_locked(self):
        user = create_user()

        assert user.failed_login_attempts == 0
        assert user.locked_until is None
        assert user.is_locked() is False

    def test_four_failures_do_not_lock(self):
        user = create_user()

        for _ in range(4):
            user.record_failed_login()

        assert user.failed_login_attempts == 4
        assert user.is_locked() is False

    @freeze_time("2024-01-01 12:00:00")
    def test_fifth_failure_locks_for_thirty_minutes(self):
        user = create_user()

        for _ in range(MAX_FAILED_LOGIN_ATTEMPTS):
            user.record_failed_login()

        assert user.is_locked() is True
        assert user.locked_until == datetime(2024, 1, 1, 12, 30, tzinfo=UTC)
        assert LOCKOUT_DURATION == timedelta(minutes=30)

    def test_failures_while_locked_do_not_extend_lock(self):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            user = create_user()
            for _ in range(5):
                user.record_failed_login()
            original_lock = user.locked_until

            frozen.tick(timedelta(minutes=10))
            user.record_failed_login()

            assert user.failed_login_attempts == 6
            assert user.locked_until == original_lock

    def test_expired_lock_is_cleared_lazily(self):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            user = create_user()
            for _ in range(5):
                user.record_failed_login()

            frozen.tick(timedelta(minutes=30))

            assert user.is_locked() is False
            assert user.locked_until is None
            assert user.failed_login_attempts == 0

    def test_lock_still_active_one_second_before_expiry(self):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            user = create_user()
            for _ in range(5):
                user.record_failed_login()

            frozen.tick(timedelta(minutes=29, seconds=59))

            assert user.is_locked() is True
            assert user.failed_login_attempts == 5

    def test_unlock_clears_counter_and_lock(self):
        user = create_user()
        for _ in range(5):
            user.record_failed_login()

        user.unlock()

        assert user.failed_login_attempts == 0
        assert user.locked_until is None
        assert user.can_login() is True


@pytest.mark.unit
class TestUserSuccessfulLogin:
    """Test successful login bookkeeping."""

    @freeze_time("2024-03-01 08:00:00")
    def test_record_successful_login_resets_state(self):
        user = create_user(failed_login_attempts=3)

        user.record_successful_login()

        assert user.failed_login_attempts == 0
        assert user.locked_until is None
        assert user.last_login_at == datetime(2024, 3, 1, 8, 0, tzinfo=UTC)

    def test_is_new_user_until_first_login(self):
        user = create_user()
        assert user.is_new_user() is True

        user.record_successful_login()

        assert user.is_new_user() is False


@pytest.mark.unit
class TestUserCanLogin:
    """Test login eligibility and denial reasons."""

    def test_active_verified_unlocked_user_can_login(self):
        user = create_user()

        assert user.can_login() is True
        assert user.login_denial_reason() is None

    def test_deactivated_user_cannot_login(self):
        user = create_user(is_active=False)

        assert user.can_login() is False
        assert user.login_denial_reason() == AuthenticationError.ACCOUNT_DEACTIVATED

    def test_unverified_user_cannot_login(self):
        user = create_user(is_verified=False)

        assert user.can_login() is False
        assert user.login_denial_reason() == AuthenticationError.EMAIL_NOT_VERIFIED

    def test_locked_user_cannot_login(self):
        user = create_user(locked_until=datetime.now(UTC) + timedelta(minutes=5))

        assert user.can_login() is False
        assert user.login_denial_reason() == AuthenticationError.ACCOUNT_LOCKED

    def test_deactivated_reported_before_other_reasons(self):
        user = create_user(
            is_active=False,
            is_verified=False,
            locked_until=datetime.now(UTC) + timedelta(minutes=5),
        )

        assert user.login_denial_reason() == AuthenticationError.ACCOUNT_DEACTIVATED


@pytest.mark.unit
class TestUserValidation:
    """Test invariant checks."""

    def test_email_is_normalized_to_lowercase(self):
        user = create_user(email="  Ada@Example.COM ")

        assert user.email == "ada@example.com"

    @pytest.mark.parametrize("email", ["", "invalid", "no@tld", "a b@example.com"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValueError, match="Invalid email format"):
            create_user(email=email)

    def test_email_longer_than_100_characters_rejected(self):
        with pytest.raises(ValueError, match="100"):
            create_user(email=f"{'a' * 95}@example.com")

    def test_blank_first_name_rejected(self):
        with pytest.raises(ValueError, match="First name"):
            create_user(first_name="   ")

    def test_last_name_longer_than_50_characters_rejected(self):
        with pytest.raises(ValueError, match="Last name"):
            create_user(last_name="x" * 51)

    def test_empty_password_hash_rejected(self):
        with pytest.raises(ValueError, match="Password hash"):
            create_user(password_hash="")

    def test_empty_roles_rejected(self):
        with pytest.raises(ValueError, match="at least one role"):
            create_user(roles=[])

    def test_update_profile_validates_new_values(self):
        user = create_user()

        with pytest.raises(ValueError):
            user.update_profile(first_name="")

    def test_update_profile_changes_names(self):
        user = create_user()

        user.update_profile(first_name=" Grace ", last_name="Hopper")

        assert user.full_name == "Grace Hopper"


@pytest.mark.unit
class TestUserRolesAndAdministration:
    """Test role management and administrative actions."""

    def test_role_checks(self):
        user = create_user(roles=[UserRole.USER, UserRole.PROVIDER])

        assert user.has_role(UserRole.PROVIDER)
        assert user.is_provider()
        assert not user.is_admin()
        assert user.has_any_role([UserRole.ADMIN, UserRole.USER])

    def test_add_role_is_idempotent(self):
        user = create_user()

        user.add_role(UserRole.ADMIN)
        user.add_role(UserRole.ADMIN)

        assert user.roles == [UserRole.USER, UserRole.ADMIN]

    def test_cannot_remove_last_role(self):
        user = create_user()

        with pytest.raises(ValueError, match="at least one role"):
            user.remove_role(UserRole.USER)

    def test_remove_role(self):
        user = create_user(roles=[UserRole.USER, UserRole.ADMIN])

        user.remove_role(UserRole.ADMIN)

        assert user.roles == [UserRole.USER]

    def test_deactivate_and_activate(self):
        user = create_user()

        user.deactivate()
        assert user.can_login() is False

        user.activate()
        assert user.can_login() is True

    def test_update_email_requires_reverification(self):
        user = create_user()

        user.update_email("New@Example.com")

        assert user.email == "new@example.com"
        assert user.is_verified is False

        user.verify_email()
        assert user.is_verified is True

    def test_update_password_rejects_empty_hash(self):
        user = create_user()

        with pytest.raises(ValueError):
            user.update_password("")

    def test_to_token_claims_requires_saved_user(self):
        user = create_user()

        with pytest.raises(ValueError, match="unsaved"):
            user.to_token_claims()

    def test_to_token_claims(self):
        user_id = uuid4()
        user = create_user(id=user_id, roles=[UserRole.USER, UserRole.ADMIN])

        assert user.to_token_claims() == {
            "user_id": str(user_id),
            "email": "user@example.com",
            "roles": ["USER", "ADMIN"],
        }

    @freeze_time("2024-01-11 00:00:00")
    def test_days_since_creation(self):
        user = create_user(created_at=datetime(2024, 1, 1, tzinfo=UTC))

        assert user.days_since_creation() == 10
