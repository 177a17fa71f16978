"""
Database entity models.

Modules:
- users: registered, Firebase-synced and guest users
- mood_entries: mood log
- interventions: guided exercises shown to users
- community: posts and threaded comments
- progress: check-in streaks and counters
- preferences: recommendation preferences
- recommendations: generated suggestion rows
- content_metadata: wellness content catalog
- contact_messages: help-center messages for the admin inbox
"""

from .community import CommunityPost, PostComment
from .contact_messages import ContactMessage
from .content_metadata import ContentMetadata
from .interventions import Intervention
from .mood_entries import MoodEntry
from .preferences import UserPreferences
from .progress import UserProgress
from .recommendations import Recommendation
from .users import User

__all__ = [
    "CommunityPost",
    "ContactMessage",
    "ContentMetadata",
    "Intervention",
    "MoodEntry",
    "PostComment",
    "Recommendation",
    "User",
    "UserPreferences",
    "UserProgress",
]
