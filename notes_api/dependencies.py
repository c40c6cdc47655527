"""
FastAPI dependency injection.
Services are built once at startup from settings.
"""

from typing import Optional
from fastapi import Request

from .config import Settings, settings as default_settings
from .db import SQLiteDatabase
from .auth import (
    AuthSessionManager,
    AuthenticatedIdentity,
    PasswordHasher,
    SessionGate,
    TokenService,
)


# Global instances (initialized on startup)
_settings: Settings = default_settings
_db: Optional[SQLiteDatabase] = None
_auth_manager: Optional[AuthSessionManager] = None
_session_gate: Optional[SessionGate] = None


async def init_dependencies(app_settings: Optional[Settings] = None):
    """Initialize global dependencies. Called on app startup."""
    global _settings, _db, _auth_manager, _session_gate

    _settings = app_settings or default_settings

    # Fails before the database is touched if the secret is required but missing
    tokens = TokenService.from_settings(_settings)

    _db = SQLiteDatabase(_settings.database_path)
    await _db.initialize()

    _auth_manager = AuthSessionManager(
        store=_db,
        hasher=PasswordHasher(rounds=_settings.bcrypt_rounds),
        tokens=tokens,
        store_timeout=_settings.store_timeout_seconds
    )
    _session_gate = SessionGate(tokens, invalid_token_status=_settings.invalid_token_status)


async def close_dependencies():
    """Close global dependencies. Called on app shutdown."""
    global _db, _auth_manager, _session_gate
    if _db:
        await _db.close()
    _db = None
    _auth_manager = None
    _session_gate = None


def get_settings() -> Settings:
    """Get the active settings."""
    return _settings


def get_db() -> SQLiteDatabase:
    """Get the database instance."""
    if _db is None:
        raise RuntimeError("Database not initialized")
    return _db


def get_auth_manager() -> AuthSessionManager:
    """Get the auth session manager instance."""
    if _auth_manager is None:
        raise RuntimeError("Auth manager not initialized")
    return _auth_manager


def get_session_gate() -> SessionGate:
    """Get the session gate instance."""
    if _session_gate is None:
        raise RuntimeError("Session gate not initialized")
    return _session_gate


async def require_auth(request: Request) -> AuthenticatedIdentity:
    """
    Dependency that requires authentication.
    Returns the verified identity of the caller.
    """
    return get_session_gate().authenticate(request)
