"""Mood entry repository."""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.mood_entries import MoodEntry
from .base import AsyncBaseRepository


class MoodEntryRepository(AsyncBaseRepository[MoodEntry]):
    """Repository for mood entry data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MoodEntry)

    async def list_for_user(self, user_id: int, limit: int = 30) -> List[MoodEntry]:
        """Latest ``limit`` entries of a user, newest first."""
        stmt = (
            select(MoodEntry)
            .where(MoodEntry.user_id == user_id)
            .order_by(MoodEntry.created_at.desc(), MoodEntry.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_since(self, user_id: int, since: datetime, *, newest_first: bool = True) -> List[MoodEntry]:
        """All entries of a user created at or after ``since``."""
        order = (
            (MoodEntry.created_at.desc(), MoodEntry.id.desc())
            if newest_first
            else (MoodEntry.created_at.asc(), MoodEntry.id.asc())
        )
        stmt = select(MoodEntry).where(MoodEntry.user_id == user_id, MoodEntry.created_at >= since).order_by(*order)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
