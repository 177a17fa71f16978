"""
API endpoints for mood tracking.

Logging a mood also returns an AI-personalized intervention built from the
user's five most recent moods.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, HTTPException, status

from mindpulse.core.database.base import utc_now
from mindpulse.core.database.entities import MoodEntry
from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.io import MoodEntryCreate, MoodEntryCreated, MoodEntryList, MoodEntryRead
from mindpulse.server.services.deps import AIServiceDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["mood-entries"])


@router.post(
    "",
    response_model=MoodEntryCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Log Mood",
    description="Store a mood entry and return a personalized intervention for it.",
    responses={
        201: {"description": "Mood entry stored"},
        422: {"description": "Invalid mood, intensity outside 1-5 or missing userId"},
    },
)
async def create_mood_entry(data: MoodEntryCreate, repos: ReposDep, ai: AIServiceDep) -> MoodEntryCreated:
    """
    Log a mood.

    - **userId**: Owner of the entry.
    - **mood**: joy, calm, neutral, stressed or anxious.
    - **intensity**: 1 (mild) to 5 (intense).
    - **secondaryMood**: Optional finer-grained feeling (e.g. overwhelmed, grateful).
    """
    user = await repos.users.get_by_id(data.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    entry = await repos.moods.create(
        MoodEntry(
            user_id=data.user_id,
            mood=data.mood.value,
            secondary_mood=data.secondary_mood,
            intensity=data.intensity,
            note=data.note,
        )
    )
    logger.debug(f"User {data.user_id} logged mood {entry.mood}/{entry.intensity}")

    recent = await repos.moods.list_for_user(data.user_id, limit=5)
    recommendation = await ai.generate_personalized_intervention(
        entry.mood,
        entry.intensity,
        [m.mood for m in recent],
        user.name,
        secondary_mood=entry.secondary_mood,
    )
    return MoodEntryCreated(mood_entry=MoodEntryRead.model_validate(entry), recommendation=recommendation)


@router.get(
    "/{user_id}",
    response_model=MoodEntryList,
    summary="List Mood Entries",
    description="The user's 30 most recent mood entries, newest first.",
)
async def list_mood_entries(user_id: int, repos: ReposDep) -> MoodEntryList:
    entries = await repos.moods.list_for_user(user_id, limit=30)
    return MoodEntryList(entries=[MoodEntryRead.model_validate(e) for e in entries])


@router.get(
    "/{user_id}/weekly",
    response_model=MoodEntryList,
    summary="Weekly Mood Entries",
    description="Mood entries of the last seven days, oldest first.",
)
async def list_weekly_mood_entries(user_id: int, repos: ReposDep) -> MoodEntryList:
    since = utc_now() - timedelta(days=7)
    entries = await repos.moods.list_since(user_id, since, newest_first=False)
    return MoodEntryList(entries=[MoodEntryRead.model_validate(e) for e in entries])
