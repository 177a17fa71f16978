from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from mindpulse.ai.service import WellnessAIService
from mindpulse.server.services.email import EmailService


@pytest.fixture
def ai_service() -> WellnessAIService:
    """AI service without a model: every generator returns its fallback."""
    return WellnessAIService(None)


@pytest.fixture
def email_service() -> MagicMock:
    service = MagicMock(spec=EmailService)
    service.send_reply_email = AsyncMock(return_value=True)
    return service


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker, ai_service, email_service) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden dependencies.

    Each request gets a fresh session on the test engine, like in production.
    """
    from mindpulse.core.database import get_session
    from mindpulse.server.main import app
    from mindpulse.server.services.deps import get_ai_service, get_email_service

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_ai_service] = lambda: ai_service
    app.dependency_overrides[get_email_service] = lambda: email_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
