"""Contact-support message repository backing the admin inbox."""

from __future__ import annotations

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.contact_messages import ContactMessage
from .base import AsyncBaseRepository


class ContactMessageRepository(AsyncBaseRepository[ContactMessage]):
    """Repository for contact-support messages."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ContactMessage)

    async def list_all(self) -> List[ContactMessage]:
        stmt = select(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def set_status(self, message: ContactMessage, status: str) -> ContactMessage:
        message.status = status
        message.updated_at = utc_now()
        return await self.update(message)
