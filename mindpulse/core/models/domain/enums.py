"""Domain enums for MindPulse models."""

from __future__ import annotations

from enum import Enum


class Mood(str, Enum):
    """Primary mood a user can log."""

    joy = "joy"
    calm = "calm"
    neutral = "neutral"
    stressed = "stressed"
    anxious = "anxious"


class InterventionType(str, Enum):
    """Kinds of guided self-help exercise."""

    breathing = "breathing"
    cbt = "cbt"
    meditation = "meditation"
    grounding = "grounding"
    custom = "custom"


class RecommendationType(str, Enum):
    """Category a recommendation row belongs to."""

    content = "content"
    activity = "activity"
    intervention = "intervention"
    community = "community"


class InteractionAction(str, Enum):
    """What the user did with a recommendation card."""

    clicked = "clicked"
    dismissed = "dismissed"


class ContactPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class ContactStatus(str, Enum):
    """Admin inbox workflow status of a contact-support message."""

    pending = "pending"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"
