"""Token generation protocol for domain layer.

Token Strategy:
    - Access tokens: JWT carrying identity and roles (1 hour default)
    - Refresh tokens: JWT carrying identity only, signed with a separate
      secret (7 days default)
    - Stateless validation (no database lookup)
"""

from datetime import datetime
from typing import Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result
from storefront.domain.value_objects import RefreshPayload, TokenPair, TokenPayload


class TokenGenerationProtocol(Protocol):
    """Token pair issuance and verification interface.

    Usage:
        pair = self.token_service.issue_token_pair(
            user_id=str(user.id), email=user.email, roles=["USER"]
        )

        match self.token_service.verify_access_token(token):
            case Success(value=payload):
                user_id = payload.user_id
            case Failure(error=error):
                # Invalid or expired token
                pass
    """

    def issue_token_pair(
        self, user_id: str, email: str, roles: list[str]
    ) -> TokenPair:
        """Mint a fresh access/refresh pair.

        Every call produces new iat and jti claims.
        """
        ...

    def verify_access_token(self, token: str) -> Result[TokenPayload, DomainError]:
        """Verify signature, expiry and type of an access token."""
        ...

    def verify_refresh_token(
        self, token: str
    ) -> Result[RefreshPayload, DomainError]:
        """Verify signature, expiry and type of a refresh token."""
        ...

    def get_token_expiration(self, token: str) -> datetime | None:
        """Read the exp claim without verifying the token."""
        ...

    def is_token_expired(self, token: str) -> bool:
        """True if the token is expired or unreadable."""
        ...
