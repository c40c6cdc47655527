"""
Authentication module.
"""

from .gate import GateDecision, GateState, SessionGate
from .manager import AuthSessionManager, CredentialStore
from .outcomes import AuthResult, Outcome
from .password import PasswordHasher
from .session import (
    SESSION_COOKIE_NAME,
    clear_session_cookie,
    get_session_token,
    set_session_cookie,
)
from .tokens import (
    AuthenticatedIdentity,
    ConfigurationError,
    TokenCheck,
    TokenFailure,
    TokenService,
)

__all__ = [
    "AuthSessionManager",
    "AuthResult",
    "AuthenticatedIdentity",
    "ConfigurationError",
    "CredentialStore",
    "GateDecision",
    "GateState",
    "Outcome",
    "PasswordHasher",
    "SessionGate",
    "SESSION_COOKIE_NAME",
    "TokenCheck",
    "TokenFailure",
    "TokenService",
    "clear_session_cookie",
    "get_session_token",
    "set_session_cookie",
]
