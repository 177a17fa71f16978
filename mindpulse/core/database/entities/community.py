"""
Community entity models.

Posts and their threaded comments. A comment may reply to another comment of
the same post through ``parent_comment_id``; deleting a post removes its
comments and deleting a comment removes its replies.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class CommunityPost(Base, table=True):
    """
    Table: community_posts
    """

    __tablename__ = "community_posts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    content: str
    anonymous: bool = Field(default=True)
    likes: int = Field(default=0)
    flagged: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime())


class PostComment(Base, table=True):
    """
    Table: post_comments
    """

    __tablename__ = "post_comments"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    post_id: int = Field(foreign_key="community_posts.id", ondelete="CASCADE", index=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    content: str
    anonymous: bool = Field(default=True)
    parent_comment_id: Optional[int] = Field(default=None, foreign_key="post_comments.id", ondelete="CASCADE")
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
