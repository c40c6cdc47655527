"""
SQLite database implementation.
Simple and direct - no abstraction layers.
"""

import asyncio
import logging
import os
import sqlite3
from datetime import datetime
from typing import List, Optional

import aiosqlite

from .models import Note, UserRecord

logger = logging.getLogger(__name__)


class SQLiteDatabase:
    """SQLite database for users and notes."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._connection: Optional[aiosqlite.Connection] = None
        # One connection is shared, so each write and its commit/rollback run alone
        self._write_lock = asyncio.Lock()

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create database connection."""
        if self._connection is None:
            os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
            self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
            await self._connection.execute("PRAGMA foreign_keys = ON")
        return self._connection

    async def initialize(self) -> None:
        """Create database tables."""
        conn = await self._get_connection()

        await conn.executescript("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                username TEXT NOT NULL UNIQUE,
                email TEXT NOT NULL UNIQUE,
                password TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS notes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                description TEXT NOT NULL,
                urgency TEXT NOT NULL,
                user_id INTEGER NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            );

            CREATE INDEX IF NOT EXISTS idx_notes_user_id ON notes(user_id);
        """)
        await conn.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    # ===== Helper Methods =====

    def _row_to_user(self, row: aiosqlite.Row) -> UserRecord:
        return UserRecord(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password_hash=row["password"]
        )

    def _row_to_note(self, row: aiosqlite.Row) -> Note:
        return Note(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            urgency=row["urgency"],
            user_id=row["user_id"],
            created_at=datetime.fromisoformat(row["created_at"])
        )

    # ===== User Operations =====

    async def create_user(self, username: str, email: str, password_hash: str) -> Optional[int]:
        """
        Insert a user.

        Returns:
            The generated user id, or None if no row was created
            (e.g. the username or email is already taken)
        """
        conn = await self._get_connection()
        async with self._write_lock:
            try:
                cursor = await conn.execute(
                    "INSERT INTO users (username, email, password) VALUES (?, ?, ?)",
                    (username, email, password_hash)
                )
            except sqlite3.IntegrityError as e:
                await conn.rollback()
                logger.warning(f"User insert rejected: {e}")
                return None
            await conn.commit()
        return cursor.lastrowid or None

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        conn = await self._get_connection()
        cursor = await conn.execute("SELECT * FROM users WHERE email = ?", (email,))
        row = await cursor.fetchone()
        return self._row_to_user(row) if row else None

    # ===== Note Operations =====

    async def get_notes(self, user_id: int) -> List[Note]:
        conn = await self._get_connection()
        cursor = await conn.execute(
            "SELECT * FROM notes WHERE user_id = ? ORDER BY id", (user_id,)
        )
        rows = await cursor.fetchall()
        return [self._row_to_note(row) for row in rows]

    async def get_note(self, note_id: int, user_id: int) -> Optional[Note]:
        conn = await self._get_connection()
        cursor = await conn.execute(
            "SELECT * FROM notes WHERE id = ? AND user_id = ?", (note_id, user_id)
        )
        row = await cursor.fetchone()
        return self._row_to_note(row) if row else None

    async def create_note(self, name: str, description: str, urgency: str, user_id: int) -> Note:
        created_at = datetime.utcnow()
        conn = await self._get_connection()
        async with self._write_lock:
            cursor = await conn.execute(
                """
                INSERT INTO notes (name, description, urgency, user_id, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (name, description, urgency, user_id, created_at.isoformat())
            )
            await conn.commit()
        return Note(
            id=cursor.lastrowid,
            name=name,
            description=description,
            urgency=urgency,
            user_id=user_id,
            created_at=created_at
        )

    async def update_note(
        self,
        note_id: int,
        user_id: int,
        name: str,
        description: str
    ) -> Optional[Note]:
        conn = await self._get_connection()
        async with self._write_lock:
            cursor = await conn.execute(
                "UPDATE notes SET name = ?, description = ? WHERE id = ? AND user_id = ?",
                (name, description, note_id, user_id)
            )
            await conn.commit()
        if cursor.rowcount == 0:
            return None
        return await self.get_note(note_id, user_id)

    async def delete_note(self, note_id: int, user_id: int) -> bool:
        conn = await self._get_connection()
        async with self._write_lock:
            cursor = await conn.execute(
                "DELETE FROM notes WHERE id = ? AND user_id = ?", (note_id, user_id)
            )
            await conn.commit()
        return cursor.rowcount > 0
