"""
Account service.

User registration, Firebase sync, guest accounts and profile updates on top
of the user repository. Passwords are stored as bcrypt hashes; every new
user gets an empty progress row.
"""

from __future__ import annotations

import random
import secrets
from typing import Optional

import bcrypt

from mindpulse.core.database.entities import User, UserProgress
from mindpulse.core.database.repositories import SqlRepoBundle
from mindpulse.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    MindPulseError,
    NotFoundError,
)
from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.io import (
    FirebaseUserSync,
    UserCreate,
    UserProfileUpdate,
    UserUpdate,
)

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: Optional[str], password_hash: str) -> bool:
    if not password:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


class AccountService:
    """User lifecycle operations over one request's repositories."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def _create_with_progress(self, user: User) -> User:
        user = await self.repos.users.create(user)
        await self.repos.progress.create(UserProgress(user_id=user.id))
        logger.info(f"Created user {user.id} (guest={user.is_guest})")
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self.repos.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def register(self, data: UserCreate) -> User:
        user = User(
            name=data.name,
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password) if data.password else None,
        )
        return await self._create_with_progress(user)

    async def sync_firebase_user(self, data: FirebaseUserSync) -> User:
        """Find the user by Firebase uid, then by email, or create one for a Firebase identity.

        Raises:
            MindPulseError: If ``firebaseUid`` is missing
        """
        if not data.firebase_uid:
            raise MindPulseError("Missing firebaseUid")

        user = await self.repos.users.get_by_firebase_uid(data.firebase_uid)
        if user is None:
            user = await self.repos.users.get_by_email(data.email)
        if user is None:
            name = (data.name or "").strip()
            if not name:
                name = data.email.split("@")[0] if data.email else "Firebase User"
            return await self._create_with_progress(
                User(
                    name=name,
                    username=name,
                    email=data.email or f"firebase_{data.firebase_uid}@example.com",
                    firebase_uid=data.firebase_uid,
                    is_guest=False,
                )
            )

        if not user.firebase_uid:
            user.firebase_uid = data.firebase_uid
            user = await self.repos.users.update(user)
            logger.info(f"Linked Firebase account to user {user.id}")
        return user

    async def create_guest(self) -> User:
        name = f"Guest{random.randint(0, 99999)}"
        # the random suffix can collide with an existing guest's username
        if await self.repos.users.get_by_username(name) is not None:
            name = f"Guest{secrets.token_hex(4)}"
        return await self._create_with_progress(
            User(
                name=name,
                username=name,
                password_hash=hash_password(secrets.token_urlsafe(8)),
                is_guest=True,
            )
        )

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Apply a partial update; changing the password requires the current one.

        Raises:
            NotFoundError: Unknown user
            InvalidCredentialsError: ``oldPassword`` does not match
            ConflictError: New email or username is taken
        """
        user = await self.get_user(user_id)
        if data.password:
            if user.password_hash and not verify_password(data.old_password, user.password_hash):
                raise InvalidCredentialsError("Old password is incorrect")
            user.password_hash = hash_password(data.password)
        if data.name:
            user.name = data.name
        if data.email:
            user.email = data.email
        if data.username:
            user.username = data.username
        return await self.repos.users.update(user)

    async def update_profile(self, user_id: int, data: UserProfileUpdate) -> User:
        if not data.name or not data.email:
            raise MindPulseError("Name and email are required")
        owner = await self.repos.users.get_by_email(data.email)
        if owner is not None and owner.id != user_id:
            raise MindPulseError("Email is already taken by another user")

        user = await self.get_user(user_id)
        user.name = data.name
        user.email = data.email
        if data.username:
            user.username = data.username
        try:
            return await self.repos.users.update(user)
        except ConflictError as e:
            raise MindPulseError("Username is already taken by another user") from e

    async def delete_user(self, user_id: int) -> None:
        """Delete a user; owned rows go with it through ``ON DELETE CASCADE``."""
        logger.info(f"Deleting user {user_id} and related data")
        await self.repos.users.delete(user_id)
        self.repos.users.session.expunge_all()
        if await self.repos.users.get_by_id(user_id) is not None:
            raise RuntimeError(f"User {user_id} was not deleted from database")
        logger.info(f"User {user_id} deleted")
