"""Recommendation and preference I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from ..domain.enums import InteractionAction
from .common import CamelModel


class RecommendationRead(CamelModel):
    id: int
    user_id: int
    type: str
    title: str
    description: Optional[str] = None
    content_id: Optional[str] = None
    content_type: Optional[str] = None
    reason: Optional[str] = None
    priority: int
    shown: bool
    clicked: bool
    dismissed: bool
    created_at: datetime
    expires_at: Optional[datetime] = None


class RecommendationList(CamelModel):
    recommendations: List[RecommendationRead]


class PreferencesUpdate(CamelModel):
    """Fields of a preferences upsert; omitted fields keep their stored value."""

    preferred_intervention_types: Optional[List[str]] = None
    preferred_content_types: Optional[List[str]] = None
    preferred_duration: Optional[int] = Field(default=None, ge=1)
    preferred_time_of_day: Optional[str] = None
    notification_preferences: Optional[Dict[str, bool]] = None


class PreferencesRead(CamelModel):
    user_id: int
    preferred_intervention_types: List[str]
    preferred_content_types: List[str]
    preferred_duration: int
    preferred_time_of_day: str
    notification_preferences: Dict[str, bool]


class PreferencesEnvelope(CamelModel):
    preferences: PreferencesRead


class InteractionRequest(CamelModel):
    action: Optional[str] = None

    def parsed_action(self) -> Optional[InteractionAction]:
        try:
            return InteractionAction(self.action)
        except ValueError:
            return None
