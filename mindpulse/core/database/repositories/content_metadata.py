"""Content metadata repository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.content_metadata import ContentMetadata
from .base import AsyncBaseRepository


class ContentMetadataRepository(AsyncBaseRepository[ContentMetadata]):
    """Repository for the wellness content catalog."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ContentMetadata)

    async def list_catalog(self, limit: int = 10) -> List[ContentMetadata]:
        stmt = select(ContentMetadata).order_by(ContentMetadata.id.asc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_content_id(self, content_id: str) -> Optional[ContentMetadata]:
        result = await self.session.execute(select(ContentMetadata).where(ContentMetadata.content_id == content_id))
        return result.scalar_one_or_none()
