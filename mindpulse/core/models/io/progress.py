"""Progress I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from mindpulse.ai.schemas import MoodInsight

from .common import CamelModel


class UserProgressRead(CamelModel):
    id: int
    user_id: int
    streak: int
    total_interventions: int
    last_check_in: Optional[datetime] = None
    weekly_mood_data: Optional[Any] = None
    updated_at: datetime


class ProgressWithInsights(CamelModel):
    """Response of ``GET /api/progress/{user_id}``."""

    progress: UserProgressRead
    insights: MoodInsight


class StreakUpdated(CamelModel):
    success: bool = True
    streak: int
