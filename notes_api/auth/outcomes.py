"""
Outcomes of the register, login and logout flows.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Outcome(str, Enum):
    """What happened to an auth request."""
    CREATED = "created"
    AUTHENTICATED = "authenticated"
    LOGGED_OUT = "logged_out"

    MISSING_FIELD = "missing_field"
    STORE_FAILURE = "store_failure"
    USER_NOT_FOUND = "user_not_found"
    BAD_CREDENTIALS = "bad_credentials"
    NO_SESSION = "no_session"
    INTERNAL_FAILURE = "internal_failure"


SUCCESS_OUTCOMES = {Outcome.CREATED, Outcome.AUTHENTICATED, Outcome.LOGGED_OUT}


@dataclass(frozen=True)
class AuthResult:
    """Result of an auth operation."""
    outcome: Outcome
    user_id: Optional[int] = None
    token: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome in SUCCESS_OUTCOMES
