"""
Registration, login and logout.
"""

import asyncio
import logging
from typing import Optional, Protocol

from ..db import UserRecord
from .outcomes import AuthResult, Outcome
from .password import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)


DEFAULT_STORE_TIMEOUT = 5.0  # seconds


class CredentialStore(Protocol):
    """User persistence as seen by the auth flows."""

    async def create_user(self, username: str, email: str, password_hash: str) -> Optional[int]:
        ...

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        ...


class AuthSessionManager:
    """
    Runs the auth flows for a single request.

    Holds only its collaborators, so one instance serves all requests.
    Expected failures come back as an AuthResult; unexpected faults are
    logged and reported as INTERNAL_FAILURE.
    """

    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenService,
        store_timeout: float = DEFAULT_STORE_TIMEOUT
    ):
        self._store = store
        self._hasher = hasher
        self._tokens = tokens
        self._store_timeout = store_timeout

    async def register(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str]
    ) -> AuthResult:
        """
        Create an account.

        Uniqueness is left to the store: a duplicate username or email
        comes back as STORE_FAILURE.
        """
        if not username or not email or not password:
            return AuthResult(Outcome.MISSING_FIELD)

        try:
            password_hash = await self._hasher.hash_async(password)
            user_id = await asyncio.wait_for(
                self._store.create_user(username, email, password_hash),
                timeout=self._store_timeout
            )
        except Exception:
            logger.exception("Error during registration")
            return AuthResult(Outcome.INTERNAL_FAILURE)

        if not user_id:
            logger.warning(f"Registration for '{username}' created no user")
            return AuthResult(Outcome.STORE_FAILURE)

        logger.info(f"Registered user '{username}' (id: {user_id})")
        return AuthResult(Outcome.CREATED, user_id=user_id)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        """Check credentials and issue a session token."""
        if not email or not password:
            return AuthResult(Outcome.MISSING_FIELD)

        try:
            user = await asyncio.wait_for(
                self._store.get_user_by_email(email),
                timeout=self._store_timeout
            )
            if user is None:
                return AuthResult(Outcome.USER_NOT_FOUND)

            if not await self._hasher.verify_async(password, user.password_hash):
                logger.info(f"Failed login for user id {user.id}")
                return AuthResult(Outcome.BAD_CREDENTIALS, user_id=user.id)

            token = self._tokens.issue(user.id, user.username)
        except Exception:
            logger.exception("Error during login")
            return AuthResult(Outcome.INTERNAL_FAILURE)

        logger.info(f"User '{user.username}' logged in")
        return AuthResult(Outcome.AUTHENTICATED, user_id=user.id, token=token)

    async def logout(self, token: Optional[str]) -> AuthResult:
        """
        End the client's session.

        Nothing is invalidated server-side; the caller clears the cookie
        and the token itself stays valid until it expires.
        """
        if not token:
            return AuthResult(Outcome.NO_SESSION)
        return AuthResult(Outcome.LOGGED_OUT)
