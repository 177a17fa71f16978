"""Intervention entity: a guided self-help exercise shown to a user."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class Intervention(Base, table=True):
    """
    Table: interventions
    """

    __tablename__ = "interventions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    type: str = Field(max_length=32, description="breathing, cbt, meditation, grounding or custom")
    title: str
    content: str
    duration: int = Field(description="Minutes")
    completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime())
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime())
