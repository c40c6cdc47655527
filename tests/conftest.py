"""
Shared fixtures: fake collaborators and a wired test client.
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from notes_api.auth import PasswordHasher, TokenService
from notes_api.config import Settings
from notes_api.db import UserRecord
from notes_api.main import create_app


TEST_SECRET = "test-secret"


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeStore:
    """In-memory credential store that records every call."""

    def __init__(self):
        self.users: Dict[int, UserRecord] = {}
        self.calls: List[str] = []

    async def create_user(self, username: str, email: str, password_hash: str) -> Optional[int]:
        self.calls.append("create_user")
        for user in self.users.values():
            if user.username == username or user.email == email:
                return None
        user_id = len(self.users) + 1
        self.users[user_id] = UserRecord(
            id=user_id, username=username, email=email, password_hash=password_hash
        )
        return user_id

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        self.calls.append("get_user_by_email")
        for user in self.users.values():
            if user.email == email:
                return user
        return None


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens(clock) -> TokenService:
    return TokenService(TEST_SECRET, clock=clock)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides) -> Settings:
        values = {
            "database_path": str(tmp_path / "app.db"),
            "session_secret": TEST_SECRET,
            "bcrypt_rounds": 4,
        }
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture
def client(make_settings):
    with TestClient(create_app(make_settings())) as test_client:
        yield test_client
