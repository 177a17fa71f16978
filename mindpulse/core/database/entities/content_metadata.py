"""Content metadata entity: catalog of static wellness content and the moods it targets."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column, DateTime, Numeric
from sqlmodel import Field

from ..base import Base, utc_now


class ContentMetadata(Base, table=True):
    """
    Table: content_metadata
    """

    __tablename__ = "content_metadata"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    content_id: str = Field(unique=True, max_length=128)
    content_type: str = Field(max_length=64)
    title: str
    description: Optional[str] = Field(default=None)
    tags: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    target_moods: Optional[Any] = Field(default=None, sa_column=Column(JSON))
    duration: Optional[int] = Field(default=None, description="Minutes")
    difficulty: Optional[str] = Field(default=None, max_length=16)
    popularity: int = Field(default=0)
    rating: float = Field(default=0.0, sa_type=Numeric(3, 2, asdecimal=False))
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())

    def targets(self, mood: str) -> bool:
        return isinstance(self.target_moods, list) and mood in self.target_moods
