"""
Signed, expiring session tokens.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from itsdangerous import BadData, URLSafeSerializer

from ..config import Settings

logger = logging.getLogger(__name__)


# Token lifetime: 1 hour
TOKEN_TTL_SECONDS = 60 * 60
TOKEN_SALT = "notes-api.session"

# Used only when SESSION_SECRET is unset. Anyone who knows it can forge tokens.
DEFAULT_SESSION_SECRET = "default"


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing."""
    pass


class TokenFailure(str, Enum):
    """Why a token was rejected."""
    MALFORMED = "malformed"
    EXPIRED = "expired"


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Identity proven by a verified session token."""
    user_id: int
    username: str


@dataclass(frozen=True)
class TokenCheck:
    """Result of verifying a token."""
    identity: Optional[AuthenticatedIdentity] = None
    failure: Optional[TokenFailure] = None

    @property
    def ok(self) -> bool:
        return self.identity is not None


class TokenService:
    """
    Issues and verifies session tokens.

    A token carries {id, username, iat, exp} and is signed with the
    configured secret. Nothing is stored server-side: a token is valid
    if its signature checks out and the current time is before exp.
    """

    def __init__(
        self,
        secret: str,
        ttl: int = TOKEN_TTL_SECONDS,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize token service.

        Args:
            secret: Secret key for signing tokens
            ttl: Validity window in seconds
            clock: Returns the current time as a UNIX timestamp
        """
        self._serializer = URLSafeSerializer(secret, salt=TOKEN_SALT)
        self._ttl = ttl
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: Callable[[], float] = time.time
    ) -> "TokenService":
        """Build the service from settings, applying the fallback secret."""
        secret = settings.session_secret
        if not secret:
            if settings.require_session_secret:
                raise ConfigurationError(
                    "SESSION_SECRET is not set and REQUIRE_SESSION_SECRET is enabled"
                )
            logger.warning(
                "SESSION_SECRET is not set, signing tokens with the built-in default secret. "
                "Tokens can be forged by anyone who knows it."
            )
            secret = DEFAULT_SESSION_SECRET
        return cls(secret, ttl=settings.token_ttl_seconds, clock=clock)

    def issue(self, user_id: int, username: str) -> str:
        """Create a signed token valid for the configured window."""
        now = int(self._clock())
        return self._serializer.dumps({
            "id": user_id,
            "username": username,
            "iat": now,
            "exp": now + self._ttl,
        })

    def verify(self, token: str) -> TokenCheck:
        """
        Verify a token's signature and expiry.

        Never raises; failures are reported through TokenCheck.failure.
        """
        if not token or not isinstance(token, str):
            return TokenCheck(failure=TokenFailure.MALFORMED)

        try:
            claims = self._serializer.loads(token)
        except BadData:
            return TokenCheck(failure=TokenFailure.MALFORMED)

        if not isinstance(claims, dict):
            return TokenCheck(failure=TokenFailure.MALFORMED)

        user_id = claims.get("id")
        username = claims.get("username")
        expires_at = claims.get("exp")
        if (
            not isinstance(user_id, int)
            or isinstance(user_id, bool)
            or not isinstance(username, str)
            or not isinstance(expires_at, (int, float))
        ):
            return TokenCheck(failure=TokenFailure.MALFORMED)

        if self._clock() >= expires_at:
            return TokenCheck(failure=TokenFailure.EXPIRED)

        return TokenCheck(identity=AuthenticatedIdentity(user_id=user_id, username=username))
