"""
Request gate for protected endpoints.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import HTTPException, Request

from .session import get_session_token
from .tokens import AuthenticatedIdentity, TokenFailure, TokenService

logger = logging.getLogger(__name__)


class GateState(str, Enum):
    """Terminal state of a gated request."""
    REJECTED_NO_TOKEN = "rejected_no_token"
    REJECTED_INVALID_TOKEN = "rejected_invalid_token"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class GateDecision:
    state: GateState
    identity: Optional[AuthenticatedIdentity] = None
    failure: Optional[TokenFailure] = None

    @property
    def allowed(self) -> bool:
        return self.state is GateState.ALLOWED


class SessionGate:
    """
    Verifies the session cookie of every protected request.

    Used as a FastAPI dependency: the handler receives the
    AuthenticatedIdentity, or never runs.
    """

    def __init__(self, tokens: TokenService, invalid_token_status: int = 401):
        """
        Args:
            tokens: Service used to verify session tokens
            invalid_token_status: Status for a present but bad token.
                401 by default; 500 matches the legacy API.
        """
        self._tokens = tokens
        self._invalid_token_status = invalid_token_status

    def evaluate(self, token: Optional[str]) -> GateDecision:
        """Decide what happens to a request carrying this token."""
        if not token:
            return GateDecision(GateState.REJECTED_NO_TOKEN)

        check = self._tokens.verify(token)
        if not check.ok:
            return GateDecision(GateState.REJECTED_INVALID_TOKEN, failure=check.failure)

        return GateDecision(GateState.ALLOWED, identity=check.identity)

    def authenticate(self, request: Request) -> AuthenticatedIdentity:
        """
        Return the caller's identity or raise an HTTPException.

        Raises:
            HTTPException: 401 without a cookie; the configured status
                for a malformed or expired token
        """
        decision = self.evaluate(get_session_token(request))

        if decision.state is GateState.REJECTED_NO_TOKEN:
            raise HTTPException(status_code=401, detail={"error": "Unauthorized"})

        if decision.state is GateState.REJECTED_INVALID_TOKEN:
            logger.warning(
                f"Rejected {decision.failure.value} session token on {request.url.path}"
            )
            if self._invalid_token_status >= 500:
                detail = {"message": "Internal server error"}
            else:
                detail = {"error": "Invalid or expired token"}
            raise HTTPException(status_code=self._invalid_token_status, detail=detail)

        return decision.identity
