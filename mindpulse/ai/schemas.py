"""
Structured outputs of the wellness AI generators.

Every field carries the default used when the model leaves it out, so a
partial answer still yields a usable object. Field names are camelCase on the
wire, matching what the web client renders.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _AIOutput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalizedIntervention(_AIOutput):
    """A short guided exercise tailored to the user's current mood."""

    type: str = Field(default="breathing", description="breathing, cbt, meditation or grounding")
    title: str = Field(default="Take a Moment", description="Brief descriptive title")
    content: str = Field(
        default="Take a few deep breaths and be gentle with yourself.",
        description="Full intervention content with gentle guidance",
    )
    duration: int = Field(default=3, description="Minutes")
    instructions: List[str] = Field(
        default_factory=lambda: ["Breathe slowly", "Focus on the present", "Be kind to yourself"],
        description="Ordered steps",
    )


class CBTPrompt(_AIOutput):
    """A thought-examination exercise in three steps."""

    question: str = Field(
        default="What's one thought that's been on your mind today?",
        description="Gentle question to identify the thought",
    )
    follow_up: str = Field(
        default="What evidence do you have for and against this thought?",
        description="Follow-up question to examine the thought",
    )
    reframing_technique: str = Field(
        default="Try viewing this situation from a friend's perspective - what would you tell them?",
        description="Specific technique to reframe the thought",
    )


class MoodInsight(_AIOutput):
    """Pattern found in a user's mood history."""

    pattern: str = Field(default="Your mood shows natural variation throughout the week")
    recommendation: str = Field(default="Continue regular check-ins to better understand your patterns")
    confidence: float = Field(default=0.7, description="0-1")

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value):
        if value is None:
            return 0.7
        return max(0.0, min(1.0, float(value)))


class ModerationResult(_AIOutput):
    safe: bool = True
    reason: Optional[str] = None


class WellnessToolSelection(_AIOutput):
    """Two wellness tool ids picked for the user's state, with the reasoning shown to them."""

    tool1: str = "breathing-exercise"
    tool2: str = "sensory-grounding"
    reasoning: str = "These tools are designed to help with your current emotional state"


class MoodSample(BaseModel):
    """One mood entry as fed to the pattern analysis."""

    mood: str
    intensity: int
    date: datetime
    secondary_mood: Optional[str] = None
