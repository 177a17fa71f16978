"""
User entity models.

Users may be registered (email + password), synced from Firebase Auth, or
anonymous guests. Every other user-owned table references ``users.id`` with
``ON DELETE CASCADE``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class User(Base, table=True):
    """
    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    username: Optional[str] = Field(default=None, unique=True, max_length=64)
    email: Optional[str] = Field(default=None, unique=True, max_length=255)
    password_hash: Optional[str] = Field(default=None, description="bcrypt hash of the password")
    name: str = Field(max_length=128)
    onboarding_completed: bool = Field(default=False)
    firebase_uid: Optional[str] = Field(default=None, unique=True, max_length=128)
    is_guest: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name}, guest={self.is_guest})"
