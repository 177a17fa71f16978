"""Unit tests for RecommendationRepository."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from mindpulse.core.database.entities import Recommendation

NOW = datetime(2026, 3, 10, 12, 0, 0)


def _rec(user_id: int, title: str, *, priority: int = 3, hours: int = 24, dismissed: bool = False) -> Recommendation:
    return Recommendation(
        user_id=user_id,
        type="activity",
        title=title,
        priority=priority,
        dismissed=dismissed,
        created_at=NOW,
        expires_at=NOW + timedelta(hours=hours),
    )


class TestRecommendationRepository:
    async def test_list_active_filters_and_orders(self, repos, user):
        await repos.recommendations.create_many(
            [
                _rec(user.id, "low", priority=2),
                _rec(user.id, "high", priority=5),
                _rec(user.id, "expired", hours=-1),
                _rec(user.id, "dismissed", dismissed=True),
            ]
        )

        active = await repos.recommendations.list_active(user.id, NOW)

        assert [r.title for r in active] == ["high", "low"]

    async def test_create_many_assigns_ids(self, repos, user):
        created = await repos.recommendations.create_many([_rec(user.id, "a"), _rec(user.id, "b")])

        assert all(r.id is not None for r in created)

    @pytest.mark.parametrize("action", ["clicked", "dismissed"])
    async def test_mark_interaction(self, repos, session, user, action):
        (rec,) = await repos.recommendations.create_many([_rec(user.id, "a")])

        assert await repos.recommendations.mark_interaction(rec.id, action) is True

        await session.refresh(rec)
        assert getattr(rec, action) is True
        assert rec.shown is True

    async def test_mark_interaction_unknown_id(self, repos):
        assert await repos.recommendations.mark_interaction(999, "clicked") is False

    async def test_mark_interaction_rejects_unknown_action(self, repos):
        with pytest.raises(ValueError):
            await repos.recommendations.mark_interaction(1, "liked")

    async def test_dismissed_row_leaves_active_list(self, repos, user):
        (rec,) = await repos.recommendations.create_many([_rec(user.id, "a")])

        await repos.recommendations.mark_interaction(rec.id, "dismissed")

        assert await repos.recommendations.list_active(user.id, NOW) == []
