"""
Password hashing with bcrypt.
"""

from fastapi.concurrency import run_in_threadpool
from passlib.hash import bcrypt


DEFAULT_ROUNDS = 10


class PasswordHasher:
    """Salted, cost-tunable bcrypt hashing."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._bcrypt = bcrypt.using(rounds=rounds)

    def hash(self, plaintext: str) -> str:
        """Hash a password. Every call embeds a fresh salt."""
        return self._bcrypt.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check a password against a stored hash.

        A missing or malformed hash is reported the same way as a wrong
        password: False.
        """
        if not plaintext or not hashed:
            return False
        try:
            return self._bcrypt.verify(plaintext, hashed)
        except (ValueError, TypeError):
            return False

    async def hash_async(self, plaintext: str) -> str:
        return await run_in_threadpool(self.hash, plaintext)

    async def verify_async(self, plaintext: str, hashed: str) -> bool:
        return await run_in_threadpool(self.verify, plaintext, hashed)
