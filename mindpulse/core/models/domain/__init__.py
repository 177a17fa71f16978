"""Domain-level enums shared by entities, schemas and services."""

from .enums import (
    ContactPriority,
    ContactStatus,
    InteractionAction,
    InterventionType,
    Mood,
    RecommendationType,
)

__all__ = [
    "ContactPriority",
    "ContactStatus",
    "InteractionAction",
    "InterventionType",
    "Mood",
    "RecommendationType",
]
