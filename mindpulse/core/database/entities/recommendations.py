"""
Recommendation entity.

A server-generated suggestion pointing a user at a piece of content or an
activity. Rows expire 24 hours after creation and are hidden once dismissed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class Recommendation(Base, table=True):
    """
    Table: recommendations
    """

    __tablename__ = "recommendations"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    type: str = Field(max_length=32, description="content, activity, intervention or community")
    title: str
    description: Optional[str] = Field(default=None)
    content_id: Optional[str] = Field(default=None, max_length=128)
    content_type: Optional[str] = Field(default=None, max_length=64)
    reason: Optional[str] = Field(default=None)
    priority: int = Field(default=1, description="1-5 scale")
    shown: bool = Field(default=False)
    clicked: bool = Field(default=False)
    dismissed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    expires_at: Optional[datetime] = Field(default=None, index=True, sa_type=DateTime())

    def __repr__(self) -> str:
        return f"Recommendation(id={self.id}, user_id={self.user_id}, content_id={self.content_id})"
