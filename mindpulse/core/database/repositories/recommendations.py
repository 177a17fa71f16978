"""
Recommendation repository.

"Active" recommendations are those not dismissed and not yet expired.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.recommendations import Recommendation
from .base import AsyncBaseRepository


class RecommendationRepository(AsyncBaseRepository[Recommendation]):
    """Repository for recommendation rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Recommendation)

    async def list_active(self, user_id: int, now: datetime) -> List[Recommendation]:
        """Non-dismissed, unexpired rows of a user, highest priority first."""
        stmt = (
            select(Recommendation)
            .where(
                Recommendation.user_id == user_id,
                Recommendation.dismissed == False,  # noqa: E712
                Recommendation.expires_at >= now,
            )
            .order_by(Recommendation.priority.desc(), Recommendation.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_many(self, recommendations: List[Recommendation]) -> List[Recommendation]:
        """Insert several rows in one transaction."""
        self.session.add_all(recommendations)
        await self.session.commit()
        for recommendation in recommendations:
            await self.session.refresh(recommendation)
        return recommendations

    async def mark_interaction(self, recommendation_id: int, action: str) -> bool:
        """Set ``clicked`` or ``dismissed`` (and ``shown``) on a row.

        Returns:
            False if no row has that id
        """
        if action not in ("clicked", "dismissed"):
            raise ValueError(f"Unsupported recommendation action: {action}")
        stmt = (
            update(Recommendation)
            .where(Recommendation.id == recommendation_id)
            .values({action: True, "shown": True})
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0
