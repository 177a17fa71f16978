"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, handed to API endpoints and services.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .community import CommunityPostRepository, PostCommentRepository
from .contact_messages import ContactMessageRepository
from .content_metadata import ContentMetadataRepository
from .interventions import InterventionRepository
from .mood_entries import MoodEntryRepository
from .preferences import UserPreferencesRepository
from .progress import UserProgressRepository
from .recommendations import RecommendationRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    moods: MoodEntryRepository
    interventions: InterventionRepository
    posts: CommunityPostRepository
    comments: PostCommentRepository
    progress: UserProgressRepository
    preferences: UserPreferencesRepository
    recommendations: RecommendationRepository
    content: ContentMetadataRepository
    contact_messages: ContactMessageRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        moods=MoodEntryRepository(session),
        interventions=InterventionRepository(session),
        posts=CommunityPostRepository(session),
        comments=PostCommentRepository(session),
        progress=UserProgressRepository(session),
        preferences=UserPreferencesRepository(session),
        recommendations=RecommendationRepository(session),
        content=ContentMetadataRepository(session),
        contact_messages=ContactMessageRepository(session),
    )
