"""
Contact-support message entity.

Messages submitted through the help center and worked through the admin
inbox. The sender may be anonymous; when a registered sender is deleted the
message is kept and ``user_id`` is cleared.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class ContactMessage(Base, table=True):
    """
    Table: contact_messages
    """

    __tablename__ = "contact_messages"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", ondelete="SET NULL")
    name: str
    email: str = Field(max_length=255)
    subject: str
    message: str
    priority: str = Field(default="medium", max_length=16)
    status: str = Field(default="pending", max_length=16, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime())
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(), sa_column_kwargs={"onupdate": utc_now}
    )
