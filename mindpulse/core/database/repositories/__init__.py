"""
Repository layer.

One repository per aggregate, all sharing ``AsyncBaseRepository`` CRUD and
bundled per request by ``build_sql_repos_from_session``.
"""

from .base import AsyncBaseRepository
from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .community import CommunityPostRepository, PostCommentRepository
from .contact_messages import ContactMessageRepository
from .content_metadata import ContentMetadataRepository
from .interventions import InterventionRepository
from .mood_entries import MoodEntryRepository
from .preferences import UserPreferencesRepository
from .progress import UserProgressRepository
from .recommendations import RecommendationRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "CommunityPostRepository",
    "ContactMessageRepository",
    "ContentMetadataRepository",
    "InterventionRepository",
    "MoodEntryRepository",
    "PostCommentRepository",
    "RecommendationRepository",
    "SqlRepoBundle",
    "UserPreferencesRepository",
    "UserProgressRepository",
    "UserRepository",
    "build_sql_repos_from_session",
]
