"""User progress entity: check-in streak and intervention counters."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class UserProgress(Base, table=True):
    """
    One row per user.

    Table: user_progress
    """

    __tablename__ = "user_progress"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", unique=True)
    streak: int = Field(default=0)
    total_interventions: int = Field(default=0)
    last_check_in: Optional[datetime] = Field(default=None, sa_type=DateTime())
    weekly_mood_data: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(), sa_column_kwargs={"onupdate": utc_now}
    )
