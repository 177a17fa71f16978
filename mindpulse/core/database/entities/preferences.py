"""User recommendation preferences entity."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class UserPreferences(Base, table=True):
    """
    Table: user_preferences
    """

    __tablename__ = "user_preferences"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", unique=True)
    preferred_intervention_types: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    preferred_content_types: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    preferred_duration: Optional[int] = Field(default=None, description="Minutes")
    preferred_time_of_day: Optional[str] = Field(default=None, max_length=16)
    notification_preferences: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(), sa_column_kwargs={"onupdate": utc_now}
    )
