"""User progress repository."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.progress import UserProgress
from .base import AsyncBaseRepository


class UserProgressRepository(AsyncBaseRepository[UserProgress]):
    """Repository for the one-per-user progress row."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserProgress)

    async def get_for_user(self, user_id: int) -> Optional[UserProgress]:
        result = await self.session.execute(select(UserProgress).where(UserProgress.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_or_create(self, user_id: int) -> UserProgress:
        progress = await self.get_for_user(user_id)
        if progress is None:
            progress = await self.create(UserProgress(user_id=user_id))
        return progress

    async def increment_interventions(self, user_id: int) -> UserProgress:
        progress = await self.get_or_create(user_id)
        progress.total_interventions += 1
        return await self.update(progress)
