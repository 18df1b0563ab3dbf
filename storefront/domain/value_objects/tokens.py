"""Token value objects.

Immutable views of what a signed token carries. The wire format (JWT claims)
is an infrastructure concern; these are what the rest of the system sees.

Token Strategy:
    - Access token: identity + roles, short-lived (default 1 hour)
    - Refresh token: identity only, long-lived (default 7 days), separate secret
    - TokenPair.expires_in is in MILLISECONDS (access token lifetime)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPayload:
    """Decoded access token.

    Attributes:
        user_id: Subject of the token (account id as string).
        email: Account email at issue time.
        roles: Role tags at issue time.
        issued_at: Issued-at, Unix seconds.
        expires_at: Expiry, Unix seconds.
    """

    user_id: str
    email: str
    roles: list[str]
    issued_at: int
    expires_at: int


@dataclass(frozen=True, slots=True, kw_only=True)
class RefreshPayload:
    """Decoded refresh token.

    Attributes:
        user_id: Subject of the token.
        token_type: Always "refresh" for a valid refresh token.
        issued_at: Issued-at, Unix seconds.
        expires_at: Expiry, Unix seconds.
    """

    user_id: str
    token_type: str
    issued_at: int
    expires_at: int


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPair:
    """Access/refresh token pair handed to clients.

    Attributes:
        access_token: Signed access token.
        refresh_token: Signed refresh token.
        expires_in: Milliseconds until the access token expires.
    """

    access_token: str
    refresh_token: str
    expires_in: int


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedIdentity:
    """Identity resolved from a verified access token.

    Attributes:
        id: Account id.
        email: Account email.
        roles: Role tags carried by the token.
    """

    id: str
    email: str
    roles: list[str]

    def has_any_role(self, required: set[str] | frozenset[str]) -> bool:
        """Check whether the identity holds at least one of the roles."""
        return not required.isdisjoint(self.roles)
