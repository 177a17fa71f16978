"""Community post and comment I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class CommunityPostCreate(CamelModel):
    user_id: int
    content: str = Field(min_length=1)
    anonymous: bool = True


class CommunityPostRead(CamelModel):
    id: int
    user_id: int
    content: str
    anonymous: bool
    likes: int
    flagged: bool
    created_at: datetime


class PostCommentCreate(CamelModel):
    """Schema for commenting; ``parentCommentId`` must point at a comment of the same post."""

    user_id: int
    content: str = Field(min_length=1)
    anonymous: bool = True
    parent_comment_id: Optional[int] = None


class PostCommentRead(CamelModel):
    id: int
    post_id: int
    user_id: int
    content: str
    anonymous: bool
    parent_comment_id: Optional[int] = None
    created_at: datetime


class AuthorRequest(CamelModel):
    """Body of the delete endpoints; only the author may delete."""

    user_id: Optional[int] = None


class PostEnvelope(CamelModel):
    post: CommunityPostRead


class PostList(CamelModel):
    posts: List[CommunityPostRead]


class CommentEnvelope(CamelModel):
    comment: PostCommentRead


class CommentList(CamelModel):
    comments: List[PostCommentRead]


class CrisisResource(CamelModel):
    name: str
    phone: Optional[str] = None
    text: Optional[str] = None
    available: str
    description: str


class CrisisResourceList(CamelModel):
    resources: List[CrisisResource]
