#!/usr/bin/env python3
"""
Register a user directly against the configured database.
Usage: python scripts/create_user.py <username> <email>
The password is prompted for.
"""

import asyncio
import getpass
import logging
import sys

from notes_api.auth import AuthSessionManager, Outcome, PasswordHasher, TokenService
from notes_api.config import settings
from notes_api.db import SQLiteDatabase

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(levelname)s - %(message)s"
)


async def create_user(username: str, email: str, password: str) -> int:
    db = SQLiteDatabase(settings.database_path)
    await db.initialize()
    try:
        manager = AuthSessionManager(
            store=db,
            hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
            tokens=TokenService.from_settings(settings),
            store_timeout=settings.store_timeout_seconds
        )
        result = await manager.register(username, email, password)
    finally:
        await db.close()

    if result.outcome is Outcome.CREATED:
        print(f"Created user '{username}' with id {result.user_id}")
        return 0
    if result.outcome is Outcome.MISSING_FIELD:
        print("Username, email and password are all required")
    elif result.outcome is Outcome.STORE_FAILURE:
        print("User was not created (username or email already taken?)")
    else:
        print("Unexpected error, see log output")
    return 1


def main():
    if len(sys.argv) != 3:
        print("Usage: python scripts/create_user.py <username> <email>")
        sys.exit(1)

    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Repeat password: "):
        print("Passwords do not match")
        sys.exit(1)

    sys.exit(asyncio.run(create_user(sys.argv[1], sys.argv[2], password)))


if __name__ == "__main__":
    main()
