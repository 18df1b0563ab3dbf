"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Account Lockout:
    - 5 consecutive failed logins lock the account for 30 minutes
    - The lock is set when the counter reaches exactly 5; failures while
      locked still count but never extend the lock
    - An expired lock is cleared lazily the next time is_locked() runs
    - A successful login or an administrative unlock clears everything

Invariants (checked after construction and every profile mutation):
    - email is well-formed, lowercase, at most 100 characters
    - first_name/last_name are non-blank, at most 50 characters
    - password_hash is non-empty
    - at least one role
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from storefront.domain.enums import UserRole
from storefront.domain.errors import AuthenticationError
from storefront.domain.validators import validate_email, validate_name

MAX_FAILED_LOGIN_ATTEMPTS = 5
LOCKOUT_DURATION = timedelta(minutes=30)


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass
class User:
    """User domain entity with authentication business rules.

    Represents a customer, provider or administrator account with its
    credentials hash, role tags and lockout state.

    Business Rules:
        - Deactivated or unverified accounts cannot login
        - Account locks after 5 failed login attempts for 30 minutes
        - Failed login counter resets on successful login

    Attributes:
        email: User email address (stored lowercase).
        password_hash: Bcrypt hashed password (never plaintext).
        first_name: Given name.
        last_name: Family name.
        roles: Role tags; never empty.
        id: Unique identifier, assigned by the store on first save.
        is_active: Account active status (deactivated users cannot login).
        is_verified: Email verification status (blocks login if False).
        failed_login_attempts: Consecutive failed login counter.
        locked_until: Timestamp until which the account is locked.
        last_login_at: Timestamp of the last successful login.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User(
        ...     email="user@example.com",
        ...     password_hash="$2b$12$...",
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ... )
        >>> user.is_locked()
        False
        >>> user.record_failed_login()
        >>> user.failed_login_attempts
        1
    """

    email: str
    password_hash: str
    first_name: str
    last_name: str
    roles: list[UserRole] = field(default_factory=lambda: [UserRole.USER])
    id: UUID | None = None
    is_active: bool = True
    is_verified: bool = True
    failed_login_attempts: int = 0
    locked_until: datetime | None = None
    last_login_at: datetime | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        self.email = validate_email(self.email)
        self._validate()

    def _validate(self) -> None:
        """Check entity invariants.

        Raises:
            ValueError: If any invariant is violated.
        """
        self.first_name = validate_name(self.first_name, field_name="First name")
        self.last_name = validate_name(self.last_name, field_name="Last name")
        if not self.password_hash:
            raise ValueError("Password hash cannot be empty")
        if not self.roles:
            raise ValueError("User must have at least one role")
        if self.failed_login_attempts < 0:
            raise ValueError("Failed login attempts cannot be negative")

    def _touch(self) -> None:
        self.updated_at = _now()

    # ------------------------------------------------------------------
    # Lockout state machine
    # ------------------------------------------------------------------

    def is_locked(self) -> bool:
        """Check if account is currently locked due to failed login attempts.

        An expired lock is cleared (together with the failure counter) as a
        side effect, so the next failure starts a fresh count.

        Returns:
            bool: True if account is locked, False otherwise.

        Example:
            >>> user.locked_until = datetime.now(UTC) + timedelta(minutes=10)
            >>> user.is_locked()
            True
            >>> user.locked_until = datetime.now(UTC) - timedelta(seconds=1)
            >>> user.is_locked()
            False
            >>> user.failed_login_attempts
            0
        """
        if self.locked_until is None:
            return False
        if _now() >= self.locked_until:
            self.locked_until = None
            self.failed_login_attempts = 0
            self._touch()
            return False
        return True

    def record_failed_login(self) -> None:
        """Increment failed login counter and lock account on the 5th failure.

        Side Effects:
            - Increments failed_login_attempts by 1
            - Sets locked_until to 30 minutes from now when the counter
              reaches exactly MAX_FAILED_LOGIN_ATTEMPTS

        Example:
            >>> user = User(..., failed_login_attempts=4)
            >>> user.record_failed_login()
            >>> user.is_locked()
            True
        """
        self.failed_login_attempts += 1
        if self.failed_login_attempts == MAX_FAILED_LOGIN_ATTEMPTS:
            self.locked_until = _now() + LOCKOUT_DURATION
        self._touch()

    def record_successful_login(self) -> None:
        """Reset lockout state and stamp the login time.

        Side Effects:
            - Resets failed_login_attempts to 0
            - Clears locked_until
            - Sets last_login_at to now
        """
        self.failed_login_attempts = 0
        self.locked_until = None
        self.last_login_at = _now()
        self._touch()

    def unlock(self) -> None:
        """Clear lockout state unconditionally (administrative action)."""
        self.failed_login_attempts = 0
        self.locked_until = None
        self._touch()

    def can_login(self) -> bool:
        """Check if user can login (active, verified, not locked).

        Returns:
            bool: True if user can login, False otherwise.
        """
        return self.is_active and self.is_verified and not self.is_locked()

    def login_denial_reason(self) -> str | None:
        """Explain why login is refused.

        Checks run in order deactivated, unverified, locked; the first failing
        check wins.

        Returns:
            Denial message, or None when login is allowed.
        """
        if not self.is_active:
            return AuthenticationError.ACCOUNT_DEACTIVATED
        if not self.is_verified:
            return AuthenticationError.EMAIL_NOT_VERIFIED
        if self.is_locked():
            return AuthenticationError.ACCOUNT_LOCKED
        return None

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    def has_role(self, role: UserRole) -> bool:
        return role in self.roles

    def has_any_role(self, roles: list[UserRole]) -> bool:
        return any(role in self.roles for role in roles)

    def is_admin(self) -> bool:
        return self.has_role(UserRole.ADMIN)

    def is_provider(self) -> bool:
        return self.has_role(UserRole.PROVIDER)

    def add_role(self, role: UserRole) -> None:
        """Grant a role. Granting a held role is a no-op."""
        if role not in self.roles:
            self.roles.append(role)
            self._touch()

    def remove_role(self, role: UserRole) -> None:
        """Revoke a role.

        Raises:
            ValueError: If it is the account's last role.
        """
        if role not in self.roles:
            return
        if len(self.roles) == 1:
            raise ValueError("User must have at least one role")
        self.roles.remove(role)
        self._touch()

    # ------------------------------------------------------------------
    # Account administration
    # ------------------------------------------------------------------

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def verify_email(self) -> None:
        self.is_verified = True
        self._touch()

    def update_profile(
        self, first_name: str | None = None, last_name: str | None = None
    ) -> None:
        """Change name fields; omitted fields are left as they are.

        Raises:
            ValueError: If a new value is blank or too long.
        """
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        self._validate()
        self._touch()

    def update_email(self, email: str) -> None:
        """Change the email and mark it unverified.

        Raises:
            ValueError: If the email is invalid.
        """
        self.email = validate_email(email)
        self.is_verified = False
        self._touch()

    def update_password(self, password_hash: str) -> None:
        """Replace the password hash.

        Raises:
            ValueError: If the hash is empty.
        """
        if not password_hash:
            raise ValueError("Password hash cannot be empty")
        self.password_hash = password_hash
        self._touch()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_new_user(self) -> bool:
        """True until the first successful login."""
        return self.last_login_at is None

    def days_since_creation(self) -> int:
        return (_now() - self.created_at).days

    def role_values(self) -> list[str]:
        return [role.value for role in self.roles]

    def to_token_claims(self) -> dict[str, object]:
        """Identity claims embedded in an access token.

        Raises:
            ValueError: If the user has not been saved yet.
        """
        if self.id is None:
            raise ValueError("Cannot build token claims for an unsaved user")
        return {
            "user_id": str(self.id),
            "email": self.email,
            "roles": self.role_values(),
        }
