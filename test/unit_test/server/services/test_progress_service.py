from datetime import datetime, timedelta

import pytest

from mindpulse.core.database.entities import MoodEntry
from mindpulse.core.errors import NotFoundError
from mindpulse.server.services.progress import ProgressService, next_streak, weekly_mood_summary

NOW = datetime(2026, 5, 20, 9, 0)


class TestNextStreak:
    @pytest.mark.parametrize(
        "current,last_check_in,expected",
        [
            (0, None, 1),
            (4, NOW - timedelta(hours=2), 4),
            (0, NOW - timedelta(hours=2), 1),
            (4, NOW - timedelta(days=1), 5),
            (4, (NOW - timedelta(days=1)).replace(hour=23, minute=59), 5),
            (4, NOW - timedelta(days=2), 1),
            (4, NOW - timedelta(days=30), 1),
        ],
    )
    def test_next_streak(self, current, last_check_in, expected):
        assert next_streak(current, last_check_in, NOW) == expected


class TestWeeklyMoodSummary:
    def test_seven_days_oldest_first(self):
        entries = [
            MoodEntry(user_id=1, mood="calm", intensity=2, created_at=NOW - timedelta(days=6)),
            MoodEntry(user_id=1, mood="joy", intensity=5, created_at=NOW),
            MoodEntry(user_id=1, mood="joy", intensity=4, created_at=NOW - timedelta(hours=1)),
        ]

        summary = weekly_mood_summary(entries, NOW)

        assert [d["date"] for d in summary][0] == "2026-05-14"
        assert summary[-1] == {"date": "2026-05-20", "averageIntensity": 4.5, "entries": 2}
        assert summary[0]["averageIntensity"] == 2.0
        assert summary[3] == {"date": "2026-05-17", "averageIntensity": None, "entries": 0}


class TestProgressService:
    async def test_streak_over_days(self, repos, user):
        days = iter([NOW - timedelta(days=2), NOW - timedelta(days=1), NOW, NOW + timedelta(days=3)])
        clock_value = {"now": next(days)}
        service = ProgressService(repos, clock=lambda: clock_value["now"])

        streaks = [(await service.record_check_in(user.id)).streak]
        for moment in days:
            clock_value["now"] = moment
            streaks.append((await service.record_check_in(user.id)).streak)

        assert streaks == [1, 2, 3, 1]

    async def test_unknown_user(self, repos):
        with pytest.raises(NotFoundError):
            await ProgressService(repos, clock=lambda: NOW).record_check_in(12345)
