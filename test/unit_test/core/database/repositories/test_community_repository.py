"""Unit tests for the community post and comment repositories."""

from __future__ import annotations

from datetime import datetime, timedelta

from mindpulse.core.database.entities import CommunityPost, PostComment

BASE = datetime(2026, 3, 10, 12, 0, 0)


class TestCommunityPostRepository:
    async def test_list_recent_newest_first(self, repos, user):
        for minutes in range(3):
            await repos.posts.create(
                CommunityPost(user_id=user.id, content=f"post {minutes}", created_at=BASE + timedelta(minutes=minutes))
            )

        posts = await repos.posts.list_recent(limit=2)

        assert [p.content for p in posts] == ["post 2", "post 1"]

    async def test_like_increments_counter(self, repos, session, user):
        post = await repos.posts.create(CommunityPost(user_id=user.id, content="hello"))

        assert await repos.posts.like(post.id) is True
        assert await repos.posts.like(post.id) is True

        await session.refresh(post)
        assert post.likes == 2

    async def test_like_missing_post(self, repos):
        assert await repos.posts.like(12345) is False

    async def test_list_for_user(self, repos, user):
        await repos.posts.create(CommunityPost(user_id=user.id, content="mine"))

        assert len(await repos.posts.list_for_user(user.id)) == 1
        assert await repos.posts.list_for_user(user.id + 1) == []


class TestPostCommentRepository:
    async def test_comments_oldest_first_with_replies(self, repos, user):
        post = await repos.posts.create(CommunityPost(user_id=user.id, content="hello"))
        parent = await repos.comments.create(
            PostComment(post_id=post.id, user_id=user.id, content="parent", created_at=BASE)
        )
        await repos.comments.create(
            PostComment(
                post_id=post.id,
                user_id=user.id,
                content="reply",
                parent_comment_id=parent.id,
                created_at=BASE + timedelta(minutes=1),
            )
        )

        comments = await repos.comments.list_for_post(post.id)

        assert [c.content for c in comments] == ["parent", "reply"]
        assert comments[1].parent_comment_id == parent.id
        assert await repos.comments.list_for_post(post.id + 1) == []
