"""
Content catalog seeding.

Inserts the built-in wellness content rows into ``content_metadata``. Rows
whose ``content_id`` already exists are left alone, so the command can be run
repeatedly.

Usage:
    python -m mindpulse.core.database.seed
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from mindpulse.core.logging_config import get_logger, setup_logging

from .entities.content_metadata import ContentMetadata
from .repositories.content_metadata import ContentMetadataRepository

logger = get_logger(__name__)

CONTENT_CATALOG: List[Dict[str, Any]] = [
    {
        "content_id": "morning-breathing-5min",
        "content_type": "breathing",
        "title": "Morning Calm Breathing",
        "description": "Start your day with a gentle 5-minute breathing exercise to center yourself",
        "tags": ["morning", "stress-relief", "beginner"],
        "target_moods": ["anxious", "stressed"],
        "duration": 5,
        "difficulty": "beginner",
        "popularity": 85,
        "rating": 4.8,
    },
    {
        "content_id": "gratitude-meditation-3min",
        "content_type": "meditation",
        "title": "Gratitude Practice",
        "description": "A short meditation to cultivate gratitude and positive energy",
        "tags": ["gratitude", "positive-thinking", "beginner"],
        "target_moods": ["joy", "calm"],
        "duration": 3,
        "difficulty": "beginner",
        "popularity": 92,
        "rating": 4.9,
    },
    {
        "content_id": "quick-reset-breathing-2min",
        "content_type": "breathing",
        "title": "Quick Reset",
        "description": "A 2-minute breathing break to help you refocus during busy moments",
        "tags": ["quick", "focus", "stress-relief"],
        "target_moods": ["stressed", "anxious"],
        "duration": 2,
        "difficulty": "beginner",
        "popularity": 78,
        "rating": 4.7,
    },
    {
        "content_id": "evening-wind-down-5min",
        "content_type": "meditation",
        "title": "Evening Wind-Down",
        "description": "Gentle meditation to help you relax and prepare for sleep",
        "tags": ["evening", "sleep", "relaxation"],
        "target_moods": ["anxious", "stressed"],
        "duration": 5,
        "difficulty": "beginner",
        "popularity": 88,
        "rating": 4.8,
    },
    {
        "content_id": "understanding-anxiety-guide",
        "content_type": "article",
        "title": "Understanding Anxiety: A Beginner's Guide",
        "description": "Learn about anxiety symptoms, causes, and evidence-based coping strategies",
        "tags": ["anxiety", "education", "coping"],
        "target_moods": ["anxious", "stressed"],
        "duration": 8,
        "difficulty": "beginner",
        "popularity": 95,
        "rating": 4.9,
    },
    {
        "content_id": "stress-management-techniques",
        "content_type": "article",
        "title": "The Science of Stress and How to Manage It",
        "description": "Evidence-based techniques for stress reduction and management",
        "tags": ["stress", "science", "techniques"],
        "target_moods": ["stressed", "anxious"],
        "duration": 10,
        "difficulty": "intermediate",
        "popularity": 87,
        "rating": 4.8,
    },
    {
        "content_id": "building-resilience-daily",
        "content_type": "article",
        "title": "Building Resilience in Daily Life",
        "description": "Practical strategies to strengthen mental resilience and emotional well-being",
        "tags": ["resilience", "daily-life", "wellness"],
        "target_moods": ["neutral", "calm"],
        "duration": 12,
        "difficulty": "intermediate",
        "popularity": 82,
        "rating": 4.7,
    },
    {
        "content_id": "anxiety-support-community",
        "content_type": "community_support",
        "title": "Anxiety Support Community",
        "description": "Connect with others who understand anxiety and share coping strategies",
        "tags": ["anxiety", "community", "support"],
        "target_moods": ["anxious", "stressed"],
        "duration": 15,
        "difficulty": "beginner",
        "popularity": 90,
        "rating": 4.8,
    },
    {
        "content_id": "mindfulness-basics",
        "content_type": "meditation",
        "title": "Mindfulness Basics",
        "description": "Learn the fundamentals of mindfulness meditation",
        "tags": ["mindfulness", "basics", "beginner"],
        "target_moods": ["neutral", "calm", "stressed"],
        "duration": 10,
        "difficulty": "beginner",
        "popularity": 89,
        "rating": 4.8,
    },
    {
        "content_id": "progressive-muscle-relaxation",
        "content_type": "meditation",
        "title": "Progressive Muscle Relaxation",
        "description": "A guided relaxation technique to release physical tension",
        "tags": ["relaxation", "tension", "body-scan"],
        "target_moods": ["stressed", "anxious"],
        "duration": 8,
        "difficulty": "intermediate",
        "popularity": 76,
        "rating": 4.6,
    },
]


async def seed_content_metadata(session: AsyncSession) -> int:
    """Insert catalog rows that are not present yet.

    Returns:
        Number of rows inserted
    """
    repo = ContentMetadataRepository(session)
    inserted = 0
    for item in CONTENT_CATALOG:
        if await repo.get_by_content_id(item["content_id"]) is not None:
            logger.debug(f"Content {item['content_id']} already seeded, skipping")
            continue
        session.add(ContentMetadata(**item))
        inserted += 1
    await session.commit()
    logger.info(f"Seeded {inserted} content metadata rows")
    return inserted


async def main() -> None:
    from .session import async_session_maker, init_db

    setup_logging()
    await init_db()
    async with async_session_maker() as session:
        await seed_content_metadata(session)


if __name__ == "__main__":
    asyncio.run(main())
