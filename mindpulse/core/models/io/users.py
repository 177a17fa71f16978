"""
User I/O models for API requests and responses.

The public user view never exposes the password hash.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user via API."""

    name: str = Field(min_length=1, description="Display name")
    username: Optional[str] = Field(default=None, description="Unique login name")
    email: Optional[str] = Field(default=None, description="Unique email address")
    password: Optional[str] = Field(default=None, description="Plain password, stored hashed")


class UserUpdate(CamelModel):
    """Schema for ``PATCH /api/users/{id}``; a new password needs ``oldPassword``."""

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    old_password: Optional[str] = None


class UserProfileUpdate(CamelModel):
    """Schema for ``PATCH /api/users/{id}/profile``; name and email are checked by the handler."""

    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None


class FirebaseUserSync(CamelModel):
    """Payload sent by the client after a Firebase sign-in."""

    firebase_uid: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None


class UserRead(CamelModel):
    """Public view of a user."""

    id: int
    name: str
    email: Optional[str] = None
    username: Optional[str] = None
    is_guest: bool = False
    firebase_uid: Optional[str] = None


class UserEnvelope(CamelModel):
    user: UserRead
