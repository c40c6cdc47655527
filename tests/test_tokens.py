"""
Tests for session token issuance and verification.
"""

import pytest

from notes_api.auth import (
    AuthenticatedIdentity,
    ConfigurationError,
    TokenFailure,
    TokenService,
)
from notes_api.auth.tokens import DEFAULT_SESSION_SECRET, TOKEN_TTL_SECONDS
from notes_api.config import Settings


def tamper_signature(token: str) -> str:
    """Change the first character of the signature part."""
    payload, signature = token.rsplit(".", 1)
    replacement = "A" if signature[0] != "A" else "B"
    return f"{payload}.{replacement}{signature[1:]}"


class TestIssueAndVerify:
    """Tests for a token's normal life."""

    def test_fresh_token_verifies_to_its_identity(self, tokens):
        check = tokens.verify(tokens.issue(42, "alice"))

        assert check.ok
        assert check.failure is None
        assert check.identity == AuthenticatedIdentity(user_id=42, username="alice")

    def test_token_is_opaque_string(self, tokens):
        token = tokens.issue(42, "alice")
        assert isinstance(token, str)
        assert "alice" not in token

    def test_valid_until_just_before_expiry(self, tokens, clock):
        token = tokens.issue(1, "alice")
        clock.advance(TOKEN_TTL_SECONDS - 1)
        assert tokens.verify(token).ok

    def test_expired_at_end_of_window(self, tokens, clock):
        token = tokens.issue(1, "alice")
        clock.advance(TOKEN_TTL_SECONDS)

        check = tokens.verify(token)
        assert not check.ok
        assert check.identity is None
        assert check.failure is TokenFailure.EXPIRED

    def test_custom_ttl(self, clock):
        service = TokenService("s", ttl=10, clock=clock)
        token = service.issue(1, "alice")
        clock.advance(11)
        assert service.verify(token).failure is TokenFailure.EXPIRED


class TestRejectedTokens:
    """Tests for tokens that must not verify."""

    def test_tampered_signature_is_malformed(self, tokens):
        token = tamper_signature(tokens.issue(1, "alice"))

        check = tokens.verify(token)
        assert check.failure is TokenFailure.MALFORMED
        assert check.identity is None

    def test_token_from_other_secret_is_malformed(self, clock):
        foreign = TokenService("other-secret", clock=clock).issue(1, "alice")
        ours = TokenService("test-secret", clock=clock)
        assert ours.verify(foreign).failure is TokenFailure.MALFORMED

    def test_expired_and_tampered_is_malformed(self, tokens, clock):
        """Signature is checked before expiry."""
        token = tamper_signature(tokens.issue(1, "alice"))
        clock.advance(TOKEN_TTL_SECONDS * 2)
        assert tokens.verify(token).failure is TokenFailure.MALFORMED

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "...."])
    def test_garbage_is_malformed(self, tokens, token):
        assert tokens.verify(token).failure is TokenFailure.MALFORMED

    def test_signed_payload_without_claims_is_malformed(self, tokens):
        from itsdangerous import URLSafeSerializer
        from notes_api.auth.tokens import TOKEN_SALT

        token = URLSafeSerializer("test-secret", salt=TOKEN_SALT).dumps({"id": 1})
        assert tokens.verify(token).failure is TokenFailure.MALFORMED

    def test_boolean_user_id_is_malformed(self, tokens, clock):
        from itsdangerous import URLSafeSerializer
        from notes_api.auth.tokens import TOKEN_SALT

        now = int(clock())
        token = URLSafeSerializer("test-secret", salt=TOKEN_SALT).dumps(
            {"id": True, "username": "alice", "iat": now, "exp": now + 60}
        )
        assert tokens.verify(token).failure is TokenFailure.MALFORMED


class TestFromSettings:
    """Tests for building the service from configuration."""

    def test_configured_secret_is_used(self):
        service = TokenService.from_settings(Settings(session_secret="configured"))
        token = service.issue(1, "alice")

        assert TokenService("configured").verify(token).ok
        assert not TokenService(DEFAULT_SESSION_SECRET).verify(token).ok

    def test_missing_secret_falls_back_to_default(self, caplog):
        service = TokenService.from_settings(Settings(session_secret=None))
        token = service.issue(1, "alice")

        assert TokenService(DEFAULT_SESSION_SECRET).verify(token).ok
        assert "SESSION_SECRET is not set" in caplog.text

    def test_missing_secret_can_be_fatal(self):
        with pytest.raises(ConfigurationError):
            TokenService.from_settings(
                Settings(session_secret=None, require_session_secret=True)
            )

    def test_ttl_comes_from_settings(self, clock):
        service = TokenService.from_settings(
            Settings(session_secret="s", token_ttl_seconds=5), clock=clock
        )
        token = service.issue(1, "alice")

        clock.advance(4)
        assert service.verify(token).ok
        clock.advance(1)
        assert service.verify(token).failure is TokenFailure.EXPIRED
