#!/usr/bin/env python3
"""
Generate a bcrypt password hash, e.g. to seed a user row by hand.
Usage: python scripts/hash_password.py <password> [rounds]
"""

import sys

from notes_api.auth import PasswordHasher
from notes_api.config import settings


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: python scripts/hash_password.py <password> [rounds]")
        sys.exit(1)

    password = sys.argv[1]
    rounds = int(sys.argv[2]) if len(sys.argv) == 3 else settings.bcrypt_rounds
    hashed = PasswordHasher(rounds=rounds).hash(password)

    print(f"\nbcrypt hash ({rounds} rounds):\n")
    print(hashed)
    print()


if __name__ == "__main__":
    main()
