"""
Database package - SQLite only.
"""

from .models import (
    UserRecord, RegisterRequest, LoginRequest, Note, NoteCreate, NoteUpdate
)
from .sqlite import SQLiteDatabase

__all__ = [
    "SQLiteDatabase",
    "UserRecord",
    "RegisterRequest",
    "LoginRequest",
    "Note",
    "NoteCreate",
    "NoteUpdate",
]
