"""
API endpoints for the peer-support community.

Posts and comments pass AI moderation before they are stored; only their
author may delete them. Also serves the static crisis hotline list.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Query, status

from mindpulse.ai.service import WellnessAIService
from mindpulse.core.database.entities import CommunityPost, PostComment
from mindpulse.core.errors import PermissionDeniedError
from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.io import (
    AuthorRequest,
    CommentEnvelope,
    CommentList,
    CommunityPostCreate,
    CommunityPostRead,
    CrisisResource,
    CrisisResourceList,
    PostCommentCreate,
    PostCommentRead,
    PostEnvelope,
    PostList,
    SuccessResponse,
)
from mindpulse.server.services.deps import AIServiceDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["community"])

CRISIS_RESOURCES = [
    CrisisResource(
        name="National Suicide Prevention Lifeline",
        phone="988",
        text="Text HOME to 741741",
        available="24/7",
        description="Free and confidential support for people in distress",
    ),
    CrisisResource(
        name="Crisis Text Line",
        phone=None,
        text="Text HELLO to 741741",
        available="24/7",
        description="Free, 24/7 support for those in crisis",
    ),
    CrisisResource(
        name="SAMHSA National Helpline",
        phone="1-800-662-4357",
        text=None,
        available="24/7",
        description="Treatment referral and information service",
    ),
]

GUIDELINES_VIOLATION = "Content violates community guidelines"


async def _moderate(ai: WellnessAIService, content: str) -> None:
    moderation = await ai.moderate_content(content)
    if not moderation.safe:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": GUIDELINES_VIOLATION, "reason": moderation.reason},
        )


def _require_author(author: Optional[AuthorRequest]) -> int:
    if author is None or not author.user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID is required")
    return author.user_id


@router.post(
    "/community/posts",
    response_model=PostEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
    description="Publish a community post after moderation.",
    responses={400: {"description": "Content violates community guidelines"}},
)
async def create_post(data: CommunityPostCreate, repos: ReposDep, ai: AIServiceDep) -> PostEnvelope:
    await _moderate(ai, data.content)
    post = await repos.posts.create(CommunityPost(user_id=data.user_id, content=data.content, anonymous=data.anonymous))
    return PostEnvelope(post=CommunityPostRead.model_validate(post))


@router.get(
    "/community/posts",
    response_model=PostList,
    summary="List Posts",
    description="Most recent community posts, newest first.",
)
async def list_posts(repos: ReposDep, limit: int = Query(default=10, ge=1, le=100)) -> PostList:
    posts = await repos.posts.list_recent(limit)
    return PostList(posts=[CommunityPostRead.model_validate(p) for p in posts])


@router.post(
    "/community/posts/{post_id}/like",
    response_model=SuccessResponse,
    summary="Like Post",
    responses={404: {"description": "Post not found"}},
)
async def like_post(post_id: int, repos: ReposDep) -> SuccessResponse:
    if not await repos.posts.like(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return SuccessResponse()


@router.post(
    "/community/posts/{post_id}/comments",
    response_model=CommentEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on Post",
    description="Add a moderated comment, optionally as a reply to another comment of the same post.",
    responses={
        400: {"description": "Content violates guidelines or parent comment belongs to another post"},
        404: {"description": "Post not found"},
    },
)
async def create_comment(
    post_id: int, data: PostCommentCreate, repos: ReposDep, ai: AIServiceDep
) -> CommentEnvelope:
    if await repos.posts.get_by_id(post_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")

    if data.parent_comment_id is not None:
        parent = await repos.comments.get_by_id(data.parent_comment_id)
        if parent is None or parent.post_id != post_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Parent comment does not belong to this post",
            )

    await _moderate(ai, data.content)
    comment = await repos.comments.create(
        PostComment(
            post_id=post_id,
            user_id=data.user_id,
            content=data.content,
            anonymous=data.anonymous,
            parent_comment_id=data.parent_comment_id,
        )
    )
    return CommentEnvelope(comment=PostCommentRead.model_validate(comment))


@router.get(
    "/community/posts/{post_id}/comments",
    response_model=CommentList,
    summary="List Comments",
    description="Comments of a post, oldest first.",
)
async def list_comments(post_id: int, repos: ReposDep) -> CommentList:
    comments = await repos.comments.list_for_post(post_id)
    return CommentList(comments=[PostCommentRead.model_validate(c) for c in comments])


@router.delete(
    "/community/posts/{post_id}",
    response_model=SuccessResponse,
    summary="Delete Post",
    description="Delete a post and its comments. Only the author may delete.",
    responses={
        400: {"description": "userId missing"},
        403: {"description": "Not the author"},
        404: {"description": "Post not found"},
    },
)
async def delete_post(
    post_id: int, repos: ReposDep, author: Optional[AuthorRequest] = Body(default=None)
) -> SuccessResponse:
    user_id = _require_author(author)
    post = await repos.posts.get_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    if post.user_id != user_id:
        raise PermissionDeniedError("You can only delete your own posts")

    await repos.posts.delete(post_id)
    logger.info(f"User {user_id} deleted post {post_id}")
    return SuccessResponse()


@router.delete(
    "/community/comments/{comment_id}",
    response_model=SuccessResponse,
    summary="Delete Comment",
    description="Delete a comment and its replies. Only the author may delete.",
    responses={
        400: {"description": "userId missing"},
        403: {"description": "Not the author"},
        404: {"description": "Comment not found"},
    },
)
async def delete_comment(
    comment_id: int, repos: ReposDep, author: Optional[AuthorRequest] = Body(default=None)
) -> SuccessResponse:
    user_id = _require_author(author)
    comment = await repos.comments.get_by_id(comment_id)
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    if comment.user_id != user_id:
        raise PermissionDeniedError("You can only delete your own comments")

    await repos.comments.delete(comment_id)
    return SuccessResponse()


@router.get(
    "/crisis-resources",
    response_model=CrisisResourceList,
    summary="Crisis Resources",
    description="Hotlines available around the clock.",
)
async def crisis_resources() -> CrisisResourceList:
    return CrisisResourceList(resources=CRISIS_RESOURCES)
