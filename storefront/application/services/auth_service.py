"""Authentication service.

Login Flow:
1. Find user by email
2. Check account exists (generic message if not)
3. Check account can login (deactivated -> unverified -> locked)
4. Verify password; on mismatch record the failure and save
5. Record successful login and save
6. Issue token pair
7. Return Success(AuthResult)

The account state check runs before password verification, so a locked
account never reveals whether a guessed password was right.

Registration Flow:
1. Validate email format
2. Reject duplicate email
3. Check password strength (all violations reported)
4. Validate profile fields, hash password, build User (role USER)
5. Save; optionally issue tokens

Architecture:
- Application layer ONLY imports from core and domain
- Store, hasher and token service are injected via protocols
- Store exceptions (including circuit breaker rejections) are logged and
  returned as SERVICE_UNAVAILABLE; nothing internal crosses the boundary
- DuplicateEmailError from save() (a concurrent signup won) maps to
  EMAIL_ALREADY_EXISTS like the up-front check
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from storefront.core.enums import ErrorCode
from storefront.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
    WeakPasswordError,
)
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities.user import User
from storefront.domain.enums import UserRole
from storefront.domain.errors import AuthenticationError as AuthMessage
from storefront.domain.errors import DuplicateEmailError
from storefront.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)
from storefront.domain.validators import validate_email, validate_name
from storefront.domain.value_objects import AuthenticatedIdentity, TokenPair

ACCOUNT_STORE = "account_store"

_DENIAL_CODES = {
    AuthMessage.ACCOUNT_DEACTIVATED: ErrorCode.ACCOUNT_DEACTIVATED,
    AuthMessage.EMAIL_NOT_VERIFIED: ErrorCode.EMAIL_NOT_VERIFIED,
    AuthMessage.ACCOUNT_LOCKED: ErrorCode.ACCOUNT_LOCKED,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthResult:
    """Successful authentication outcome.

    Attributes:
        user: The authenticated (or newly registered) account.
        tokens: Issued token pair; None after registration without tokens.
    """

    user: User
    tokens: TokenPair | None = None


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=AuthMessage.INVALID_CREDENTIALS,
    )


def _access_denied() -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.ACCESS_DENIED,
        message=AuthMessage.ACCESS_DENIED,
    )


def _unavailable() -> ServiceUnavailableError:
    return ServiceUnavailableError(
        code=ErrorCode.SERVICE_UNAVAILABLE,
        message=AuthMessage.SERVICE_UNAVAILABLE,
        dependency=ACCOUNT_STORE,
    )


class AuthService:
    """Login, registration, token refresh and token verification.

    Usage:
        service = AuthService(
            user_repo=user_repo,
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        )
        match await service.login("user@example.com", "SecurePass123!"):
            case Success(value=auth):
                tokens = auth.tokens
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize auth service with dependencies.

        Args:
            user_repo: Account store.
            password_service: Password hashing/verification/strength service.
            token_service: Token pair issuance and verification service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def login(self, email: str, password: str) -> Result[AuthResult, DomainError]:
        """Authenticate with email and password.

        Returns:
            Success(AuthResult) with a fresh token pair.
            Failure with INVALID_CREDENTIALS, ACCOUNT_DEACTIVATED,
            EMAIL_NOT_VERIFIED, ACCOUNT_LOCKED or SERVICE_UNAVAILABLE.

        Side Effects:
            - Increments failed_login_attempts on wrong password
              (locks the account on the 5th consecutive failure).
            - Resets the counter and stamps last_login_at on success.
        """
        normalized_email = (email or "").strip().lower()
        self._logger.info("login_attempted", email=normalized_email)

        try:
            # Step 1: Find user by email
            user = await self._user_repo.find_by_email(normalized_email)

            # Step 2: Check account exists
            if user is None:
                self._logger.warning(
                    "login_failed", email=normalized_email, reason="unknown_email"
                )
                # Same message as wrong password to prevent user enumeration
                return Failure(error=_invalid_credentials())

            # Step 3: Check account can login
            denial = user.login_denial_reason()
            if denial is not None:
                self._logger.warning(
                    "login_denied", user_id=str(user.id), reason=denial
                )
                return Failure(
                    error=AuthenticationError(code=_DENIAL_CODES[denial], message=denial)
                )

            # Step 4: Verify password
            if not self._password_service.verify_password(password, user.password_hash):
                user.record_failed_login()
                await self._user_repo.save(user)

                self._logger.warning(
                    "login_failed",
                    user_id=str(user.id),
                    reason="wrong_password",
                    failed_login_attempts=user.failed_login_attempts,
                )
                if user.locked_until is not None:
                    self._logger.warning(
                        "account_locked",
                        user_id=str(user.id),
                        locked_until=user.locked_until.isoformat(),
                    )
                return Failure(error=_invalid_credentials())

            # Step 5: Record successful login
            user.record_successful_login()
            user = await self._user_repo.save(user)
        except Exception as e:
            self._logger.error("login_store_failure", error=e)
            return Failure(error=_unavailable())

        # Step 6: Issue token pair
        tokens = self._issue_tokens(user)

        self._logger.info("login_succeeded", user_id=str(user.id))

        # Step 7: Return Success
        return Success(value=AuthResult(user=user, tokens=tokens))

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        *,
        issue_tokens: bool = False,
    ) -> Result[AuthResult, DomainError]:
        """Create a new account with role USER.

        Args:
            email: Email address (normalized to lowercase).
            password: Plaintext password (must pass the strength policy).
            first_name: Given name.
            last_name: Family name.
            issue_tokens: Also log the new user in.

        Returns:
            Success(AuthResult) with the saved user (and tokens if requested).
            Failure with VALIDATION_FAILED, EMAIL_ALREADY_EXISTS,
            PASSWORD_TOO_WEAK or SERVICE_UNAVAILABLE.
        """
        # Step 1: Validate email format
        try:
            normalized_email = validate_email(email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED, message=str(e), field="email"
                )
            )

        # Step 2: Reject duplicate email
        try:
            existing = await self._user_repo.find_by_email(normalized_email)
        except Exception as e:
            self._logger.error("registration_store_failure", error=e)
            return Failure(error=_unavailable())
        if existing is not None:
            return self._email_taken(normalized_email)

        # Step 3: Check password strength
        strength = self._password_service.assess_strength(password)
        if not strength.is_valid:
            self._logger.info(
                "registration_rejected",
                email=normalized_email,
                reason="weak_password",
                violation_count=len(strength.errors),
            )
            return Failure(
                error=WeakPasswordError(
                    code=ErrorCode.PASSWORD_TOO_WEAK,
                    message=", ".join(strength.errors),
                    field="password",
                    violations=list(strength.errors),
                )
            )

        # Step 4: Validate profile, hash password, build user
        try:
            validate_name(first_name, field_name="First name")
            validate_name(last_name, field_name="Last name")
        except ValueError as e:
            return Failure(
                error=ValidationError(code=ErrorCode.VALIDATION_FAILED, message=str(e))
            )

        user = User(
            email=normalized_email,
            password_hash=self._password_service.hash_password(password),
            first_name=first_name,
            last_name=last_name,
            roles=[UserRole.USER],
        )

        # Step 5: Save (store enforces uniqueness for concurrent signups)
        try:
            user = await self._user_repo.save(user)
        except DuplicateEmailError:
            return self._email_taken(normalized_email)
        except Exception as e:
            self._logger.error("registration_store_failure", error=e)
            return Failure(error=_unavailable())

        self._logger.info("user_registered", user_id=str(user.id))

        tokens = self._issue_tokens(user) if issue_tokens else None
        return Success(value=AuthResult(user=user, tokens=tokens))

    async def refresh_token(self, token: str) -> Result[AuthResult, DomainError]:
        """Exchange a refresh token for a brand-new token pair.

        Returns:
            Success(AuthResult) with new tokens.
            Failure with TOKEN_INVALID, ACCESS_DENIED or SERVICE_UNAVAILABLE.
        """
        match self._token_service.verify_refresh_token(token):
            case Failure(error=error):
                self._logger.warning("token_refresh_rejected", reason="invalid_token")
                return Failure(error=error)
            case Success(value=payload):
                pass

        match await self._load_active_user(payload.user_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=user):
                pass

        tokens = self._issue_tokens(user)
        self._logger.info("token_refreshed", user_id=str(user.id))
        return Success(value=AuthResult(user=user, tokens=tokens))

    async def verify_access_token(
        self, token: str
    ) -> Result[AuthenticatedIdentity, DomainError]:
        """Resolve an access token to the identity behind it.

        The account is reloaded, so deactivated or locked users are rejected
        even while their token is still within its lifetime.

        Returns:
            Success(AuthenticatedIdentity).
            Failure with TOKEN_INVALID, ACCESS_DENIED or SERVICE_UNAVAILABLE.
        """
        match self._token_service.verify_access_token(token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                pass

        match await self._load_active_user(payload.user_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=user):
                pass

        return Success(
            value=AuthenticatedIdentity(
                id=str(user.id), email=user.email, roles=list(payload.roles)
            )
        )

    async def unlock_account(self, user_id: UUID) -> Result[User, DomainError]:
        """Clear the lockout state of an account (administrative).

        Returns:
            Success(User) after saving.
            Failure with USER_NOT_FOUND or SERVICE_UNAVAILABLE.
        """
        try:
            user = await self._user_repo.find_by_id(user_id)
            if user is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=AuthMessage.USER_NOT_FOUND,
                        resource_type="User",
                        resource_id=str(user_id),
                    )
                )
            user.unlock()
            user = await self._user_repo.save(user)
        except Exception as e:
            self._logger.error("unlock_store_failure", error=e, user_id=str(user_id))
            return Failure(error=_unavailable())

        self._logger.info("account_unlocked", user_id=str(user_id))
        return Success(value=user)

    async def _load_active_user(self, raw_user_id: str) -> Result[User, DomainError]:
        try:
            user_id = UUID(raw_user_id)
        except ValueError:
            return Failure(error=_access_denied())

        try:
            user = await self._user_repo.find_by_id(user_id)
        except Exception as e:
            self._logger.error("user_lookup_store_failure", error=e)
            return Failure(error=_unavailable())

        if user is None or not user.can_login():
            self._logger.warning("access_denied", user_id=raw_user_id)
            return Failure(error=_access_denied())
        return Success(value=user)

    def _email_taken(self, email: str) -> Failure[ConflictError]:
        self._logger.warning("registration_rejected", email=email, reason="email_exists")
        return Failure(
            error=ConflictError(
                code=ErrorCode.EMAIL_ALREADY_EXISTS,
                message=AuthMessage.EMAIL_ALREADY_EXISTS,
                resource_type="User",
                conflicting_field="email",
            )
        )

    def _issue_tokens(self, user: User) -> TokenPair:
        claims = user.to_token_claims()
        return self._token_service.issue_token_pair(
            user_id=claims["user_id"],
            email=claims["email"],
            roles=claims["roles"],
        )
