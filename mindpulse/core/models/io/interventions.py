"""Intervention I/O models, including the AI generation requests."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from mindpulse.ai.schemas import CBTPrompt, PersonalizedIntervention

from ..domain.enums import InterventionType, Mood
from .common import CamelModel


class InterventionCreate(CamelModel):
    """Schema for storing an intervention shown to a user."""

    user_id: int
    type: InterventionType
    title: str = Field(min_length=1)
    content: str
    duration: int = Field(ge=1, description="Minutes")


class InterventionRead(CamelModel):
    id: int
    user_id: int
    type: str
    title: str
    content: str
    duration: int
    completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime


class InterventionEnvelope(CamelModel):
    intervention: InterventionRead


class InterventionList(CamelModel):
    interventions: List[InterventionRead]


class MoodContext(CamelModel):
    """Mood snapshot that parameterizes the AI generators."""

    mood: Mood
    intensity: int = Field(ge=1, le=5)
    secondary_mood: Optional[str] = Field(default=None, max_length=32)


class UserMoodContext(MoodContext):
    """Mood snapshot of a known user."""

    user_id: int


class GeneratedIntervention(CamelModel):
    intervention: PersonalizedIntervention


class CBTPromptEnvelope(CamelModel):
    prompt: CBTPrompt
