"""Mood entry I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from mindpulse.ai.schemas import PersonalizedIntervention

from ..domain.enums import Mood
from .common import CamelModel


class MoodEntryCreate(CamelModel):
    """Schema for logging a mood via API."""

    user_id: int = Field(description="Owner of the entry")
    mood: Mood = Field(description="Primary mood label")
    intensity: int = Field(ge=1, le=5, description="1-5 scale")
    note: Optional[str] = Field(default=None)
    secondary_mood: Optional[str] = Field(default=None, max_length=32, description="Free-form secondary feeling")


class MoodEntryRead(CamelModel):
    """Schema for reading a mood entry from API."""

    id: int
    user_id: int
    mood: str
    secondary_mood: Optional[str] = None
    intensity: int
    note: Optional[str] = None
    created_at: datetime


class MoodEntryCreated(CamelModel):
    """Response of ``POST /api/mood-entries``; ``recommendation`` is absent for unknown users."""

    mood_entry: MoodEntryRead
    recommendation: Optional[PersonalizedIntervention] = None


class MoodEntryList(CamelModel):
    entries: List[MoodEntryRead]
