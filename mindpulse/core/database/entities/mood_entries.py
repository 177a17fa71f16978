"""
Mood entry entity.

A mood entry records a primary mood label, an optional secondary feeling and
an intensity on a 1-5 scale at a point in time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class MoodEntry(Base, table=True):
    """
    Table: mood_entries
    """

    __tablename__ = "mood_entries"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    mood: str = Field(max_length=32, description="joy, calm, neutral, stressed or anxious")
    secondary_mood: Optional[str] = Field(default=None, max_length=32)
    intensity: int = Field(description="1-5 scale")
    note: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime())

    def __repr__(self) -> str:
        return f"MoodEntry(id={self.id}, user_id={self.user_id}, mood={self.mood}, intensity={self.intensity})"
