"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and the web client. They are separate from database
entities so the wire format (camelCase) can evolve independently.

Modules:
- common: camelCase base model
- users, mood_entries, interventions, progress, community,
  recommendations, contact_messages: per-resource schemas
"""

from .common import CamelModel, SuccessResponse
from .community import (
    AuthorRequest,
    CommentEnvelope,
    CommentList,
    CommunityPostCreate,
    CommunityPostRead,
    CrisisResource,
    CrisisResourceList,
    PostCommentCreate,
    PostCommentRead,
    PostEnvelope,
    PostList,
)
from .contact_messages import (
    ContactMessageCreate,
    ContactMessageEnvelope,
    ContactMessageList,
    ContactMessageRead,
    ReplyRequest,
    ReplyResult,
    StatusUpdate,
)
from .interventions import (
    CBTPromptEnvelope,
    GeneratedIntervention,
    InterventionCreate,
    InterventionEnvelope,
    InterventionList,
    InterventionRead,
    MoodContext,
    UserMoodContext,
)
from .mood_entries import MoodEntryCreate, MoodEntryCreated, MoodEntryList, MoodEntryRead
from .progress import ProgressWithInsights, StreakUpdated, UserProgressRead
from .recommendations import (
    InteractionRequest,
    PreferencesEnvelope,
    PreferencesRead,
    PreferencesUpdate,
    RecommendationList,
    RecommendationRead,
)
from .users import (
    FirebaseUserSync,
    UserCreate,
    UserEnvelope,
    UserProfileUpdate,
    UserRead,
    UserUpdate,
)

__all__ = [
    "AuthorRequest",
    "CBTPromptEnvelope",
    "CamelModel",
    "CommentEnvelope",
    "CommentList",
    "CommunityPostCreate",
    "CommunityPostRead",
    "ContactMessageCreate",
    "ContactMessageEnvelope",
    "ContactMessageList",
    "ContactMessageRead",
    "CrisisResource",
    "CrisisResourceList",
    "FirebaseUserSync",
    "GeneratedIntervention",
    "InteractionRequest",
    "InterventionCreate",
    "InterventionEnvelope",
    "InterventionList",
    "InterventionRead",
    "MoodContext",
    "MoodEntryCreate",
    "MoodEntryCreated",
    "MoodEntryList",
    "MoodEntryRead",
    "PostCommentCreate",
    "PostCommentRead",
    "PostEnvelope",
    "PostList",
    "PreferencesEnvelope",
    "PreferencesRead",
    "PreferencesUpdate",
    "ProgressWithInsights",
    "RecommendationList",
    "RecommendationRead",
    "ReplyRequest",
    "ReplyResult",
    "StatusUpdate",
    "StreakUpdated",
    "SuccessResponse",
    "UserCreate",
    "UserEnvelope",
    "UserMoodContext",
    "UserProfileUpdate",
    "UserRead",
    "UserUpdate",
]
