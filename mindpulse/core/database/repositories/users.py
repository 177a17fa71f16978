"""
User repository.

Lookups by the three unique identifiers (email, username, Firebase uid) and
unique-constraint handling for inserts and updates.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mindpulse.core.errors import ConflictError

from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        """Insert a user.

        Raises:
            ConflictError: If email, username or Firebase uid is already taken
        """
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("Email, username or account is already registered") from e
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Persist user changes.

        Raises:
            ConflictError: If the new email or username belongs to another user
        """
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("Email or username is already taken by another user") from e
        await self.session.refresh(user)
        return user

    async def get_by_email(self, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.firebase_uid == firebase_uid))
        return result.scalar_one_or_none()
