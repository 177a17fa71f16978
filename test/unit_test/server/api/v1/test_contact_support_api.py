from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MESSAGE = {
    "name": "Riley",
    "email": "riley@example.com",
    "subject": "Cannot log in",
    "message": "The app keeps asking me to sign in.",
    "priority": "high",
}


async def _submit(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/api/contact-support", json={**MESSAGE, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["message"]


async def test_submit_message(client: AsyncClient):
    message = await _submit(client)

    assert message["status"] == "pending"
    assert message["priority"] == "high"
    assert message["userId"] is None


@pytest.mark.parametrize("field", ["name", "email", "subject", "message", "priority"])
async def test_submit_requires_every_field(client: AsyncClient, field):
    payload = {**MESSAGE, field: ""}

    response = await client.post("/api/contact-support", json=payload)

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing required fields"}


async def test_submit_rejects_unknown_priority(client: AsyncClient):
    response = await client.post("/api/contact-support", json={**MESSAGE, "priority": "critical"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid priority"}


async def test_admin_lists_newest_first(client: AsyncClient):
    await _submit(client, subject="first")
    await _submit(client, subject="second")

    response = await client.get("/api/admin/contact-messages")

    assert [m["subject"] for m in response.json()["messages"]] == ["second", "first"]


async def test_admin_get_and_missing(client: AsyncClient):
    message = await _submit(client)

    found = await client.get(f"/api/admin/contact-messages/{message['id']}")
    missing = await client.get("/api/admin/contact-messages/999")

    assert found.json()["message"]["subject"] == "Cannot log in"
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Message not found"}


async def test_admin_updates_status(client: AsyncClient):
    message = await _submit(client)

    ok = await client.patch(f"/api/admin/contact-messages/{message['id']}/status", json={"status": "in_progress"})
    bad = await client.patch(f"/api/admin/contact-messages/{message['id']}/status", json={"status": "done"})

    assert ok.json()["message"]["status"] == "in_progress"
    assert bad.status_code == 400
    assert bad.json() == {"detail": "Invalid status"}


async def test_admin_deletes_message(client: AsyncClient):
    message = await _submit(client)

    deleted = await client.delete(f"/api/admin/contact-messages/{message['id']}")
    again = await client.delete(f"/api/admin/contact-messages/{message['id']}")

    assert deleted.json() == {"success": True}
    assert again.status_code == 404


async def test_reply_sends_email_and_resolves(client: AsyncClient, email_service: MagicMock):
    message = await _submit(client)

    response = await client.post(
        f"/api/admin/contact-messages/{message['id']}/reply", json={"replyMessage": "Please reset your password."}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["emailSent"] is True
    assert body["note"] == "Reply sent successfully"
    assert body["message"]["status"] == "resolved"
    sent = email_service.send_reply_email.await_args.args[0]
    assert sent.to == "riley@example.com"
    assert sent.original_subject == "Cannot log in"
    assert sent.reply_message == "Please reset your password."


async def test_reply_resolves_even_when_email_fails(client: AsyncClient, email_service: MagicMock):
    email_service.send_reply_email.return_value = False
    message = await _submit(client)

    response = await client.post(f"/api/admin/contact-messages/{message['id']}/reply", json={"replyMessage": "Hi"})

    body = response.json()
    assert body["emailSent"] is False
    assert body["note"] == "Failed to send email, but status updated"
    assert body["message"]["status"] == "resolved"


async def test_reply_requires_text(client: AsyncClient, email_service: MagicMock):
    message = await _submit(client)

    response = await client.post(f"/api/admin/contact-messages/{message['id']}/reply", json={"replyMessage": "  "})

    assert response.status_code == 400
    assert response.json() == {"detail": "Reply message is required"}
    email_service.send_reply_email.assert_not_awaited()


async def test_reply_to_missing_message(client: AsyncClient):
    response = await client.post("/api/admin/contact-messages/321/reply", json={"replyMessage": "Hi"})

    assert response.status_code == 404
