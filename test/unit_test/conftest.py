"""Shared database fixtures for unit tests.

Every test gets its own in-memory SQLite database; ``StaticPool`` keeps the
single connection alive so all sessions of the test see the same data.
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncGenerator, Optional

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel.pool import StaticPool

from mindpulse.core.database import create_all, create_engine, create_sessionmaker
from mindpulse.core.database.entities import MoodEntry, User, UserProgress
from mindpulse.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def repos(session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


@pytest_asyncio.fixture
async def user(repos: SqlRepoBundle) -> User:
    """A registered user with an empty progress row."""
    created = await repos.users.create(User(name="Alex", username="alex", email="alex@example.com"))
    await repos.progress.create(UserProgress(user_id=created.id))
    return created


@pytest_asyncio.fixture
async def add_mood(repos: SqlRepoBundle):
    """Insert a mood entry with an explicit timestamp."""

    async def _add(
        user_id: int,
        mood: str,
        created_at: datetime,
        intensity: int = 3,
        secondary_mood: Optional[str] = None,
    ) -> MoodEntry:
        return await repos.moods.create(
            MoodEntry(
                user_id=user_id,
                mood=mood,
                intensity=intensity,
                secondary_mood=secondary_mood,
                created_at=created_at,
            )
        )

    return _add
