"""
API endpoints for user progress: counters, check-in streaks and AI insights
into the user's mood pattern.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from mindpulse.ai.schemas import MoodSample
from mindpulse.core.models.io import ProgressWithInsights, StreakUpdated, UserProgressRead
from mindpulse.server.services.deps import AIServiceDep, ProgressServiceDep, ReposDep

router = APIRouter(tags=["progress"])


@router.get(
    "/{user_id}",
    response_model=ProgressWithInsights,
    summary="Get Progress",
    description="Progress counters plus an AI analysis of the last 30 mood entries.",
    responses={404: {"description": "Progress not found"}},
)
async def get_progress(user_id: int, repos: ReposDep, ai: AIServiceDep) -> ProgressWithInsights:
    progress = await repos.progress.get_for_user(user_id)
    if progress is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Progress not found")

    history = await repos.moods.list_for_user(user_id, limit=30)
    insights = await ai.analyze_mood_pattern(
        [
            MoodSample(mood=e.mood, intensity=e.intensity, date=e.created_at, secondary_mood=e.secondary_mood)
            for e in history
        ]
    )
    return ProgressWithInsights(progress=UserProgressRead.model_validate(progress), insights=insights)


@router.post(
    "/{user_id}/streak",
    response_model=StreakUpdated,
    summary="Record Check-in",
    description="Record a daily check-in: same day keeps the streak, the next day extends it, a gap resets it.",
    responses={404: {"description": "User not found"}},
)
async def record_check_in(user_id: int, progress_service: ProgressServiceDep) -> StreakUpdated:
    progress = await progress_service.record_check_in(user_id)
    return StreakUpdated(streak=progress.streak)
