"""User preferences repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.preferences import UserPreferences
from .base import AsyncBaseRepository


class UserPreferencesRepository(AsyncBaseRepository[UserPreferences]):
    """Repository for recommendation preferences."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserPreferences)

    async def get_for_user(self, user_id: int) -> Optional[UserPreferences]:
        result = await self.session.execute(select(UserPreferences).where(UserPreferences.user_id == user_id))
        return result.scalar_one_or_none()

    async def upsert(self, user_id: int, values: Dict[str, Any]) -> UserPreferences:
        """Update the user's row with ``values`` or insert one if none exists."""
        prefs = await self.get_for_user(user_id)
        if prefs is None:
            return await self.create(UserPreferences(user_id=user_id, **values))
        for key, value in values.items():
            setattr(prefs, key, value)
        prefs.updated_at = utc_now()
        return await self.update(prefs)
