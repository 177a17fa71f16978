"""
Generative AI content for MindPulse.

Modules:
- schemas: structured outputs of every generator
- prompts: system prompts and prompt builders
- service: ``WellnessAIService`` over a pydantic-ai agent
"""

from .schemas import (
    CBTPrompt,
    ModerationResult,
    MoodInsight,
    MoodSample,
    PersonalizedIntervention,
    WellnessToolSelection,
)
from .service import WellnessAIService, create_ai_service_from_settings

__all__ = [
    "CBTPrompt",
    "ModerationResult",
    "MoodInsight",
    "MoodSample",
    "PersonalizedIntervention",
    "WellnessAIService",
    "WellnessToolSelection",
    "create_ai_service_from_settings",
]
