"""
Community repositories.

Posts are listed newest first; comments of a post oldest first so reply
threads read top-down.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.community import CommunityPost, PostComment
from .base import AsyncBaseRepository


class CommunityPostRepository(AsyncBaseRepository[CommunityPost]):
    """Repository for community posts."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CommunityPost)

    async def list_recent(self, limit: int = 10) -> List[CommunityPost]:
        stmt = select(CommunityPost).order_by(CommunityPost.created_at.desc(), CommunityPost.id.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_user(self, user_id: int, limit: int = 5) -> List[CommunityPost]:
        stmt = select(CommunityPost).where(CommunityPost.user_id == user_id).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def like(self, post_id: int) -> bool:
        """Atomically increment the like counter.

        Returns:
            False if the post does not exist
        """
        stmt = update(CommunityPost).where(CommunityPost.id == post_id).values(likes=CommunityPost.likes + 1)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0


class PostCommentRepository(AsyncBaseRepository[PostComment]):
    """Repository for post comments."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PostComment)

    async def list_for_post(self, post_id: int) -> List[PostComment]:
        stmt = (
            select(PostComment)
            .where(PostComment.post_id == post_id)
            .order_by(PostComment.created_at.asc(), PostComment.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
