"""
Pydantic models for database entities and request bodies.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """A registered user. The password is only ever stored hashed."""
    id: int
    username: str
    email: str
    password_hash: str


class RegisterRequest(BaseModel):
    """Input for registering an account."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Input for logging in."""
    email: Optional[str] = None
    password: Optional[str] = None


class Note(BaseModel):
    """A note owned by a user."""
    id: int
    name: str
    description: str
    urgency: str
    user_id: int
    created_at: datetime = Field(default_factory=datetime.utcnow)


class NoteCreate(BaseModel):
    """Input for creating a note."""
    name: Optional[str] = None
    description: Optional[str] = None
    urgency: Optional[str] = None


class NoteUpdate(BaseModel):
    """Input for updating a note."""
    name: Optional[str] = None
    description: Optional[str] = None
