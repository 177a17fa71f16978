"""
Check-in streak tracking.

A check-in on the same UTC day as the previous one keeps the streak, a
check-in on the following day extends it, and any longer gap starts a new
streak at 1. Each check-in also refreshes the per-day mood summary of the
last seven days shown on the progress chart.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

from mindpulse.core.database.base import utc_now
from mindpulse.core.database.entities import MoodEntry, UserProgress
from mindpulse.core.database.repositories import SqlRepoBundle
from mindpulse.core.errors import NotFoundError
from mindpulse.core.logging_config import get_logger

logger = get_logger(__name__)


def next_streak(current: int, last_check_in: Optional[datetime], now: datetime) -> int:
    if last_check_in is None:
        return 1
    gap_days = (now.date() - last_check_in.date()).days
    if gap_days <= 0:
        return max(current, 1)
    if gap_days == 1:
        return current + 1
    return 1


def weekly_mood_summary(entries: List[MoodEntry], now: datetime) -> List[Dict[str, Any]]:
    """Average intensity per UTC day for the seven days ending today, oldest first."""
    by_day: Dict[str, List[int]] = defaultdict(list)
    for entry in entries:
        by_day[entry.created_at.date().isoformat()].append(entry.intensity)

    summary = []
    for offset in range(6, -1, -1):
        day = (now - timedelta(days=offset)).date().isoformat()
        intensities = by_day.get(day, [])
        summary.append(
            {
                "date": day,
                "averageIntensity": round(sum(intensities) / len(intensities), 2) if intensities else None,
                "entries": len(intensities),
            }
        )
    return summary


class ProgressService:
    def __init__(self, repos: SqlRepoBundle, clock: Callable[[], datetime] = utc_now) -> None:
        self.repos = repos
        self.clock = clock

    async def record_check_in(self, user_id: int) -> UserProgress:
        """Apply a check-in to the user's streak and refresh the weekly mood summary.

        Raises:
            NotFoundError: Unknown user
        """
        if await self.repos.users.get_by_id(user_id) is None:
            raise NotFoundError("User", user_id)
        now = self.clock()
        progress = await self.repos.progress.get_or_create(user_id)
        progress.streak = next_streak(progress.streak, progress.last_check_in, now)
        progress.last_check_in = now

        week_start = (now - timedelta(days=6)).replace(hour=0, minute=0, second=0, microsecond=0)
        entries = await self.repos.moods.list_since(user_id, week_start, newest_first=False)
        progress.weekly_mood_data = weekly_mood_summary(entries, now)

        progress = await self.repos.progress.update(progress)
        logger.debug(f"User {user_id} checked in, streak={progress.streak}")
        return progress
