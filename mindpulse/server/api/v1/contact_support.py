"""
API endpoints for the help center and the admin inbox.

Users submit contact-support messages; admins list them, move them through
pending / in_progress / resolved / closed, and reply by email.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from mindpulse.core.database.entities import ContactMessage
from mindpulse.core.database.repositories import SqlRepoBundle
from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.domain.enums import ContactPriority, ContactStatus
from mindpulse.core.models.io import (
    ContactMessageCreate,
    ContactMessageEnvelope,
    ContactMessageList,
    ContactMessageRead,
    ReplyRequest,
    ReplyResult,
    StatusUpdate,
    SuccessResponse,
)
from mindpulse.server.services.deps import EmailServiceDep, ReposDep
from mindpulse.server.services.email import ReplyEmailData

logger = get_logger(__name__)

router = APIRouter()

MESSAGE_NOT_FOUND = "Message not found"


async def _get_message(repos: SqlRepoBundle, message_id: int) -> ContactMessage:
    message = await repos.contact_messages.get_by_id(message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MESSAGE_NOT_FOUND)
    return message


@router.post(
    "/contact-support",
    response_model=ContactMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
    tags=["contact-support"],
    summary="Contact Support",
    description="Submit a help-center message. name, email, subject, message and priority are required.",
    responses={400: {"description": "Missing required fields or unknown priority"}},
)
async def create_contact_message(data: ContactMessageCreate, repos: ReposDep) -> ContactMessageEnvelope:
    required = (data.name, data.email, data.subject, data.message, data.priority)
    if not all(value and value.strip() for value in required):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")
    if data.priority not in ContactPriority.__members__:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid priority")

    message = await repos.contact_messages.create(
        ContactMessage(
            user_id=data.user_id,
            name=data.name,
            email=data.email,
            subject=data.subject,
            message=data.message,
            priority=data.priority,
        )
    )
    logger.info(f"Contact message {message.id} received (priority={message.priority})")
    return ContactMessageEnvelope(message=ContactMessageRead.model_validate(message))


@router.get(
    "/admin/contact-messages",
    response_model=ContactMessageList,
    tags=["admin"],
    summary="List Contact Messages",
    description="All contact-support messages, newest first.",
)
async def list_contact_messages(repos: ReposDep) -> ContactMessageList:
    messages = await repos.contact_messages.list_all()
    return ContactMessageList(messages=[ContactMessageRead.model_validate(m) for m in messages])


@router.get(
    "/admin/contact-messages/{message_id}",
    response_model=ContactMessageEnvelope,
    tags=["admin"],
    summary="Get Contact Message",
    responses={404: {"description": MESSAGE_NOT_FOUND}},
)
async def get_contact_message(message_id: int, repos: ReposDep) -> ContactMessageEnvelope:
    message = await _get_message(repos, message_id)
    return ContactMessageEnvelope(message=ContactMessageRead.model_validate(message))


@router.patch(
    "/admin/contact-messages/{message_id}/status",
    response_model=ContactMessageEnvelope,
    tags=["admin"],
    summary="Update Message Status",
    responses={400: {"description": "Invalid status"}, 404: {"description": MESSAGE_NOT_FOUND}},
)
async def update_contact_message_status(
    message_id: int, data: StatusUpdate, repos: ReposDep
) -> ContactMessageEnvelope:
    if data.status not in ContactStatus.__members__:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")

    message = await _get_message(repos, message_id)
    message = await repos.contact_messages.set_status(message, data.status)
    return ContactMessageEnvelope(message=ContactMessageRead.model_validate(message))


@router.delete(
    "/admin/contact-messages/{message_id}",
    response_model=SuccessResponse,
    tags=["admin"],
    summary="Delete Contact Message",
    responses={404: {"description": MESSAGE_NOT_FOUND}},
)
async def delete_contact_message(message_id: int, repos: ReposDep) -> SuccessResponse:
    if not await repos.contact_messages.delete(message_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MESSAGE_NOT_FOUND)
    return SuccessResponse()


@router.post(
    "/admin/contact-messages/{message_id}/reply",
    response_model=ReplyResult,
    tags=["admin"],
    summary="Reply to Contact Message",
    description="Email a reply to the sender and mark the message resolved. The status changes even when "
    "the email cannot be sent.",
    responses={400: {"description": "Reply message is required"}, 404: {"description": MESSAGE_NOT_FOUND}},
)
async def reply_to_contact_message(
    message_id: int, data: ReplyRequest, repos: ReposDep, email: EmailServiceDep
) -> ReplyResult:
    reply = (data.reply_message or "").strip()
    if not reply:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Reply message is required")

    message = await _get_message(repos, message_id)
    email_sent = await email.send_reply_email(
        ReplyEmailData(
            to=message.email,
            from_name=message.name,
            original_subject=message.subject,
            original_message=message.message,
            reply_message=reply,
        )
    )
    message = await repos.contact_messages.set_status(message, ContactStatus.resolved.value)
    return ReplyResult(
        message=ContactMessageRead.model_validate(message),
        email_sent=email_sent,
        note="Reply sent successfully" if email_sent else "Failed to send email, but status updated",
    )
