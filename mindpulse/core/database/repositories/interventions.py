"""Intervention repository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.interventions import Intervention
from .base import AsyncBaseRepository


class InterventionRepository(AsyncBaseRepository[Intervention]):
    """Repository for intervention data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Intervention)

    async def list_for_user(self, user_id: int, limit: Optional[int] = None) -> List[Intervention]:
        """Interventions of a user, newest first."""
        stmt = (
            select(Intervention)
            .where(Intervention.user_id == user_id)
            .order_by(Intervention.created_at.desc(), Intervention.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_completed(self, intervention: Intervention) -> Intervention:
        intervention.completed = True
        intervention.completed_at = utc_now()
        return await self.update(intervention)
