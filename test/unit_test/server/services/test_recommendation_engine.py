"""Unit tests for the rule-based recommendation engine.

The engine runs against an in-memory database with a fixed clock so time
windows and day boundaries are deterministic.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from mindpulse.core.database.entities import (
    CommunityPost,
    Intervention,
    MoodEntry,
    Recommendation,
)
from mindpulse.core.database.seed import seed_content_metadata
from mindpulse.core.models.domain.enums import InteractionAction
from mindpulse.server.services.recommendations import (
    DEFAULT_PREFERENCES,
    MAX_RECOMMENDATIONS,
    Candidate,
    MoodPatterns,
    PersonalizedRecommendationEngine,
    UserSnapshot,
    has_consecutive_days,
    select_new_candidates,
)

MORNING = datetime(2026, 3, 10, 8, 30)
AFTERNOON = datetime(2026, 3, 10, 14, 0)
EVENING = datetime(2026, 3, 10, 20, 0)
NIGHT = datetime(2026, 3, 10, 2, 0)


def _entry(mood: str, created_at: datetime, intensity: int = 3, secondary: str | None = None) -> MoodEntry:
    return MoodEntry(user_id=1, mood=mood, intensity=intensity, secondary_mood=secondary, created_at=created_at)


def _snapshot(recent_moods, recent_interventions=()) -> UserSnapshot:
    return UserSnapshot(
        user_id=1,
        recent_moods=list(recent_moods),
        recent_interventions=list(recent_interventions),
        preferences=dict(DEFAULT_PREFERENCES),
        post_count=0,
    )


def _engine(repos, now: datetime) -> PersonalizedRecommendationEngine:
    return PersonalizedRecommendationEngine(repos, clock=lambda: now)


async def _log_two_days(add_mood, user_id: int, now: datetime, mood: str, **kwargs) -> None:
    await add_mood(user_id, mood, now - timedelta(days=1), **kwargs)
    await add_mood(user_id, mood, now - timedelta(minutes=5), **kwargs)


class TestConsecutiveDaysGate:
    def test_requires_two_entries(self):
        assert has_consecutive_days([_entry("calm", MORNING)], MORNING.date()) is False

    def test_same_day_entries_do_not_count(self):
        entries = [_entry("calm", MORNING), _entry("joy", MORNING - timedelta(hours=2))]
        assert has_consecutive_days(entries, MORNING.date()) is False

    def test_adjacent_days(self):
        entries = [_entry("calm", MORNING - timedelta(days=3)), _entry("joy", MORNING - timedelta(days=4))]
        assert has_consecutive_days(entries, MORNING.date()) is True

    def test_gap_between_days(self):
        entries = [_entry("calm", MORNING), _entry("joy", MORNING - timedelta(days=2))]
        assert has_consecutive_days(entries, MORNING.date()) is False


class TestMoodPatterns:
    def test_defaults_without_history(self):
        patterns = MoodPatterns.from_entries([])
        assert patterns.most_frequent_mood == "neutral"
        assert patterns.average_intensity == 3.0
        assert patterns.total_entries == 0

    def test_most_frequent_and_average(self):
        entries = [_entry("stressed", MORNING, 5), _entry("calm", MORNING, 1), _entry("stressed", MORNING, 3)]
        patterns = MoodPatterns.from_entries(entries)
        assert patterns.most_frequent_mood == "stressed"
        assert patterns.average_intensity == 3.0


class TestSelectNewCandidates:
    def _candidate(self, content_id: str, priority: int) -> Candidate:
        return Candidate("activity", content_id, "", "activity", "", priority, content_id)

    def test_dedupes_against_existing_and_itself(self):
        existing = [Recommendation(user_id=1, type="activity", title="a", content_id="a", priority=3)]
        candidates = [self._candidate("a", 5), self._candidate("b", 3), self._candidate("b", 4)]

        chosen = select_new_candidates(candidates, existing, 10)

        assert [c.content_id for c in chosen] == ["b"]
        assert chosen[0].priority == 3

    def test_highest_priority_first_stable(self):
        candidates = [self._candidate("x", 3), self._candidate("y", 5), self._candidate("z", 3)]

        chosen = select_new_candidates(candidates, [], 2)

        assert [c.content_id for c in chosen] == ["y", "x"]

    def test_non_positive_limit(self):
        assert select_new_candidates([self._candidate("x", 3)], [], 0) == []


class TestGenerateRecommendations:
    async def test_gate_blocks_single_day(self, repos, user, add_mood):
        await add_mood(user.id, "calm", MORNING)
        await add_mood(user.id, "calm", MORNING - timedelta(hours=1))

        assert await _engine(repos, MORNING).generate_recommendations(user.id) == []

    async def test_caps_at_twelve_with_unique_content(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, MORNING, "anxious", intensity=4)

        recs = await _engine(repos, MORNING).generate_recommendations(user.id)

        assert len(recs) == MAX_RECOMMENDATIONS
        assert len({r.content_id for r in recs}) == MAX_RECOMMENDATIONS
        assert [r.priority for r in recs] == sorted((r.priority for r in recs), reverse=True)
        assert all(r.expires_at == MORNING + timedelta(hours=24) for r in recs)

    async def test_second_call_reuses_active_rows(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, MORNING, "anxious")
        engine = _engine(repos, MORNING)

        first = await engine.generate_recommendations(user.id)
        second = await engine.generate_recommendations(user.id)

        assert [r.id for r in second] == [r.id for r in first]

    async def test_expired_rows_are_replaced(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, MORNING, "anxious")
        first = await _engine(repos, MORNING).generate_recommendations(user.id)

        later = MORNING + timedelta(hours=25)
        await add_mood(user.id, "anxious", later)
        second = await _engine(repos, later).generate_recommendations(user.id)

        assert second
        assert not {r.id for r in first} & {r.id for r in second}

    async def test_morning_anxious_candidates(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, MORNING, "anxious")

        recs = await _engine(repos, MORNING).generate_recommendations(user.id)
        content_ids = {r.content_id for r in recs}

        assert "morning-breathing-5min" in content_ids
        assert "anxiety-relief-breathing-4min" in content_ids
        assert "anxiety-support-community" in content_ids

    async def test_time_windows(self, repos, user):
        engine = _engine(repos, MORNING)
        patterns = MoodPatterns.from_entries([])

        def ids(now, mood="calm", intensity=2):
            snapshot = type("S", (), {"recent_moods": [_entry(mood, now, intensity)]})()
            return [c.content_id for c in engine.mood_based_candidates(snapshot, patterns, now)]

        assert ids(MORNING) == ["gratitude-meditation-3min", "mindful-morning-3min"]
        assert ids(AFTERNOON) == ["energy-boost-2min"]
        assert ids(AFTERNOON, "calm", 4) == ["quick-reset-breathing-2min", "energy-boost-2min"]
        assert ids(EVENING, "stressed") == [
            "evening-wind-down-5min",
            "progressive-relaxation-5min",
            "stress-release-4min",
        ]
        assert ids(NIGHT) == []
        assert ids(MORNING.replace(hour=11)) == []
        assert ids(MORNING.replace(hour=17)) == []

    @pytest.mark.parametrize(
        "mood,secondary,content_id",
        [
            ("stressed", "overwhelmed", "crisis-safety-planning"),
            ("anxious", "panicked", "immediate-grounding-2min"),
            ("joy", "grateful", "gratitude-journal"),
            ("joy", "energetic", "energy-channeling"),
            ("neutral", "tired", "sleep-prep-5min"),
        ],
    )
    async def test_secondary_mood_templates(self, repos, mood, secondary, content_id):
        engine = _engine(repos, NIGHT)
        snapshot = type("S", (), {"recent_moods": [_entry(mood, NIGHT, 3, secondary)]})()

        candidates = engine.mood_based_candidates(snapshot, MoodPatterns.from_entries([]), NIGHT)

        assert content_id in [c.content_id for c in candidates]
        assert next(c for c in candidates if c.content_id == content_id).priority >= 4

    async def test_unmatched_secondary_mood_adds_nothing(self, repos):
        engine = _engine(repos, NIGHT)
        snapshot = type("S", (), {"recent_moods": [_entry("calm", NIGHT, 3, "tired")]})()

        assert engine.mood_based_candidates(snapshot, MoodPatterns.from_entries([]), NIGHT) == []

    async def test_recent_completion_suppresses_wellness_break(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, NIGHT, "calm")
        await repos.interventions.create(
            Intervention(
                user_id=user.id, type="breathing", title="t", content="c", duration=2,
                completed=True, completed_at=NIGHT - timedelta(hours=3), created_at=NIGHT - timedelta(hours=4),
            )
        )

        recs = await _engine(repos, NIGHT).generate_recommendations(user.id)

        assert "wellness-break-suggestion" not in {r.content_id for r in recs}
        assert "mood-checkin" not in {r.content_id for r in recs}

    async def test_no_post_suggests_joining(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, NIGHT, "calm")

        recs = await _engine(repos, NIGHT).generate_recommendations(user.id)

        assert "community-encouragement" in {r.content_id for r in recs}

    async def test_existing_post_skips_joining(self, repos, user, add_mood):
        await _log_two_days(add_mood, user.id, NIGHT, "calm")
        await repos.posts.create(CommunityPost(user_id=user.id, content="hi"))

        recs = await _engine(repos, NIGHT).generate_recommendations(user.id)

        assert "community-encouragement" not in {r.content_id for r in recs}

    async def test_catalog_content_matches_frequent_mood(self, repos, user, add_mood, session):
        await seed_content_metadata(session)
        await _log_two_days(add_mood, user.id, NIGHT, "stressed")

        recs = await _engine(repos, NIGHT).generate_recommendations(user.id)

        catalog = [r for r in recs if r.reason and r.reason.startswith("Based on your mood patterns")]
        assert len(catalog) == 1
        assert catalog[0].content_id == "morning-breathing-5min"
        assert catalog[0].priority == 4


class TestPreferences:
    async def test_defaults(self, repos, user):
        prefs = await _engine(repos, MORNING).get_user_preferences(user.id)
        assert prefs == DEFAULT_PREFERENCES
        prefs["preferred_content_types"].append("video")
        assert DEFAULT_PREFERENCES["preferred_content_types"] == ["articles", "audio"]

    async def test_update_merges_with_defaults(self, repos, user):
        engine = _engine(repos, MORNING)

        prefs = await engine.update_user_preferences(user.id, {"preferred_duration": 15, "preferred_time_of_day": None})

        assert prefs["preferred_duration"] == 15
        assert prefs["preferred_time_of_day"] == "morning"


class TestTrackInteraction:
    async def test_numeric_string_id(self, repos, user):
        rec = await repos.recommendations.create(
            Recommendation(user_id=user.id, type="activity", title="t", content_id="c", priority=3)
        )

        updated = await _engine(repos, MORNING).track_interaction(str(rec.id), InteractionAction.dismissed)

        assert updated is True
        await repos.recommendations.session.refresh(rec)
        assert rec.dismissed is True
        assert rec.shown is True

    async def test_fallback_id_is_only_logged(self, repos):
        assert await _engine(repos, MORNING).track_interaction("fallback-3", InteractionAction.clicked) is False

    async def test_unknown_numeric_id(self, repos):
        assert await _engine(repos, MORNING).track_interaction(9999, InteractionAction.clicked) is False

    async def test_out_of_range_numeric_id(self, repos):
        assert (
            await _engine(repos, MORNING).track_interaction("99999999999999999999999", InteractionAction.clicked)
            is False
        )


class TestWindowEdges:
    @pytest.mark.parametrize(
        "hour,expected",
        [
            (6, ["gratitude-meditation-3min", "mindful-morning-3min"]),
            (10, ["gratitude-meditation-3min", "mindful-morning-3min"]),
            (11, []),
            (12, ["energy-boost-2min"]),
            (16, ["energy-boost-2min"]),
            (17, []),
            (18, ["progressive-relaxation-5min"]),
            (22, ["progressive-relaxation-5min"]),
            (23, []),
        ],
    )
    async def test_window_boundaries(self, repos, hour, expected):
        now = MORNING.replace(hour=hour, minute=0)
        engine = _engine(repos, now)
        snapshot = _snapshot([_entry("calm", now, 2)])

        candidates = engine.mood_based_candidates(snapshot, MoodPatterns.from_entries([]), now)

        assert [c.content_id for c in candidates] == expected


class TestActivityRules:
    def _completed(self, completed_at: datetime) -> Intervention:
        return Intervention(
            user_id=1, type="breathing", title="t", content="c", duration=2, completed=True, completed_at=completed_at
        )

    def _ids(self, repos, snapshot: UserSnapshot, patterns: MoodPatterns) -> list:
        return [c.content_id for c in _engine(repos, NIGHT).activity_candidates(snapshot, patterns, NIGHT)]

    async def test_completion_exactly_two_days_ago_is_recent(self, repos):
        snapshot = _snapshot([_entry("calm", NIGHT)], [self._completed(NIGHT - timedelta(days=2))])

        assert "wellness-break-suggestion" not in self._ids(repos, snapshot, MoodPatterns.from_entries([]))

    async def test_completion_just_over_two_days_ago_suggests_break(self, repos):
        snapshot = _snapshot([_entry("calm", NIGHT)], [self._completed(NIGHT - timedelta(days=2, seconds=1))])

        assert "wellness-break-suggestion" in self._ids(repos, snapshot, MoodPatterns.from_entries([]))

    async def test_streak_encouragement_with_positive_moods(self, repos):
        moods = [_entry("joy", NIGHT), _entry("calm", NIGHT - timedelta(days=1)), _entry("stressed", NIGHT)]

        ids = self._ids(repos, _snapshot(moods), MoodPatterns.from_entries(moods))

        assert "streak-encouragement" in ids

    async def test_no_streak_encouragement_with_one_positive_mood(self, repos):
        moods = [_entry("joy", NIGHT), _entry("anxious", NIGHT), _entry("stressed", NIGHT)]

        assert "streak-encouragement" not in self._ids(repos, _snapshot(moods), MoodPatterns.from_entries(moods))

    async def test_no_streak_encouragement_below_three_entries(self, repos):
        moods = [_entry("joy", NIGHT), _entry("calm", NIGHT)]

        assert "streak-encouragement" not in self._ids(repos, _snapshot(moods), MoodPatterns.from_entries(moods))


class TestDatabaseErrors:
    async def test_database_error_yields_empty_list(self, repos, user, monkeypatch):
        async def failing_list_since(*args, **kwargs):
            raise OperationalError("SELECT mood_entries", {}, Exception("database is locked"))

        rollback = AsyncMock()
        monkeypatch.setattr(repos.moods, "list_since", failing_list_since)
        monkeypatch.setattr(repos.recommendations.session, "rollback", rollback)

        assert await _engine(repos, MORNING).generate_recommendations(user.id) == []
        rollback.assert_awaited_once()
