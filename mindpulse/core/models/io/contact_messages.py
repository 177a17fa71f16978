"""Contact-support and admin inbox I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .common import CamelModel


class ContactMessageCreate(CamelModel):
    """Help-center form; the handler rejects blank required fields with 400."""

    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    priority: Optional[str] = None
    user_id: Optional[int] = None


class ContactMessageRead(CamelModel):
    id: int
    user_id: Optional[int] = None
    name: str
    email: str
    subject: str
    message: str
    priority: str
    status: str
    created_at: datetime
    updated_at: datetime


class ContactMessageEnvelope(CamelModel):
    message: ContactMessageRead


class ContactMessageList(CamelModel):
    messages: List[ContactMessageRead]


class StatusUpdate(CamelModel):
    status: Optional[str] = None


class ReplyRequest(CamelModel):
    reply_message: Optional[str] = None


class ReplyResult(CamelModel):
    """Response of the admin reply endpoint."""

    message: ContactMessageRead
    email_sent: bool
    note: str
