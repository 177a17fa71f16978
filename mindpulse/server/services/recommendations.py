"""
Personalized recommendation engine.

Builds the recommendation cards shown on the dashboard from a user's recent
mood entries, completed interventions, preferences and community activity.

Generation is gated: a user must have logged moods on two consecutive UTC
days within the past week. Active rows (not dismissed, not expired) are
reused; the engine only tops the list up to ``MAX_RECOMMENDATIONS`` with new
candidates, which expire 24 hours after creation.

All day and hour arithmetic is in UTC.
"""

from __future__ import annotations

import copy
import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, List, Union

from sqlalchemy.exc import SQLAlchemyError

from mindpulse.core.database.base import utc_now
from mindpulse.core.database.entities import Intervention, MoodEntry, Recommendation
from mindpulse.core.database.repositories import SqlRepoBundle
from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.domain.enums import InteractionAction
from mindpulse.core.monitoring import log_error, log_recommendations_generated

logger = get_logger(__name__)

MAX_RECOMMENDATIONS = 12
RECOMMENDATION_TTL = timedelta(hours=24)
GATE_WINDOW = timedelta(days=7)
PATTERN_WINDOW = timedelta(days=30)
# largest value an INTEGER primary key can hold
MAX_ROW_ID = 2**31 - 1

DEFAULT_PREFERENCES: Dict[str, Any] = {
    "preferred_intervention_types": ["breathing", "meditation"],
    "preferred_content_types": ["articles", "audio"],
    "preferred_duration": 5,
    "preferred_time_of_day": "morning",
    "notification_preferences": {"mood_reminders": True, "intervention_suggestions": True},
}


@dataclass(frozen=True)
class Candidate:
    """A recommendation before it is persisted."""

    type: str
    title: str
    description: str
    content_type: str
    reason: str
    priority: int
    content_id: str

    def to_entity(self, user_id: int, now: datetime) -> Recommendation:
        return Recommendation(
            user_id=user_id,
            type=self.type,
            title=self.title,
            description=self.description,
            content_id=self.content_id,
            content_type=self.content_type,
            reason=self.reason,
            priority=self.priority,
            shown=False,
            clicked=False,
            dismissed=False,
            created_at=now,
            expires_at=now + RECOMMENDATION_TTL,
        )


@dataclass
class MoodPatterns:
    """Aggregates over the last 30 days of mood entries."""

    history: List[MoodEntry] = field(default_factory=list)
    average_intensity: float = 3.0
    most_frequent_mood: str = "neutral"

    @property
    def total_entries(self) -> int:
        return len(self.history)

    @classmethod
    def from_entries(cls, entries: List[MoodEntry]) -> "MoodPatterns":
        """``entries`` newest first; ties on frequency go to the most recently logged mood."""
        if not entries:
            return cls()
        counts = Counter(entry.mood for entry in entries)
        return cls(
            history=entries,
            average_intensity=sum(entry.intensity for entry in entries) / len(entries),
            most_frequent_mood=counts.most_common(1)[0][0],
        )


@dataclass
class UserSnapshot:
    user_id: int
    recent_moods: List[MoodEntry]
    recent_interventions: List[Intervention]
    preferences: Dict[str, Any]
    post_count: int


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

MINDFUL_MORNING = Candidate(
    "intervention", "Mindful Morning", "A gentle 3-minute mindfulness practice to start your day",
    "meditation", "Morning mindfulness can set a positive tone for your entire day", 3, "mindful-morning-3min",
)
GRATITUDE_MEDITATION = Candidate(
    "intervention", "Gratitude Meditation", "Build on your positive energy with a gratitude practice",
    "meditation", "You're feeling great! This gratitude meditation can amplify your positive mood", 4,
    "gratitude-meditation-3min",
)
QUICK_RESET = Candidate(
    "intervention", "Quick Reset", "A 2-minute breathing break to help you refocus", "breathing",
    "You seem to be experiencing some stress. This quick reset can help you regain focus", 5,
    "quick-reset-breathing-2min",
)
ENERGY_BOOST = Candidate(
    "intervention", "Energy Boost", "A quick 2-minute energizing breathing exercise", "breathing",
    "Afternoon energy dip? This quick exercise can help you feel more alert", 3, "energy-boost-2min",
)
EVENING_WIND_DOWN = Candidate(
    "intervention", "Evening Wind-Down", "Gentle meditation to help you relax before sleep", "meditation",
    "Help yourself unwind from the day with this calming evening practice", 4, "evening-wind-down-5min",
)
PROGRESSIVE_RELAXATION = Candidate(
    "intervention", "Progressive Relaxation", "Release tension with this guided muscle relaxation", "meditation",
    "Perfect for unwinding after a busy day", 3, "progressive-relaxation-5min",
)
ANXIETY_RELIEF = Candidate(
    "intervention", "Anxiety Relief", "A specialized breathing technique for anxiety", "breathing",
    "This technique is specifically designed to help with anxiety symptoms", 4, "anxiety-relief-breathing-4min",
)
STRESS_RELEASE = Candidate(
    "intervention", "Stress Release", "A 4-minute stress relief breathing pattern", "breathing",
    "This pattern helps activate your body's natural relaxation response", 4, "stress-release-4min",
)

# (primary mood, secondary mood) -> template
SECONDARY_MOOD_TEMPLATES: Dict[tuple, Candidate] = {
    ("stressed", "overwhelmed"): Candidate(
        "intervention", "Crisis Safety Planning", "Create a personalized safety plan for overwhelming moments",
        "cbt", "Feeling overwhelmed can be challenging. A safety plan can help you navigate difficult moments.", 5,
        "crisis-safety-planning",
    ),
    ("anxious", "panicked"): Candidate(
        "intervention", "Immediate Grounding", "Quick grounding techniques for acute anxiety", "grounding",
        "When feeling panicked, grounding techniques can help you find your center quickly.", 5,
        "immediate-grounding-2min",
    ),
    ("joy", "grateful"): Candidate(
        "activity", "Gratitude Journal", "Build on your grateful feeling with a gratitude practice", "activity",
        "Your gratitude is beautiful! This practice can amplify your positive feelings.", 4, "gratitude-journal",
    ),
    ("joy", "energetic"): Candidate(
        "activity", "Channel Your Energy", "Use your positive energy for a productive activity", "activity",
        "Great energy! Channel it into something meaningful.", 4, "energy-channeling",
    ),
    ("neutral", "tired"): Candidate(
        "intervention", "Gentle Sleep Prep", "A calming routine to help you rest", "meditation",
        "Rest is important. This gentle practice can help you prepare for sleep.", 4, "sleep-prep-5min",
    ),
}

MOOD_CHECK_IN = Candidate(
    "activity", "How are you feeling?", "Take a moment to check in with yourself", "mood_tracking",
    "You haven't tracked your mood today. Regular check-ins help build self-awareness", 5, "mood-checkin",
)
WELLNESS_BREAK = Candidate(
    "activity", "Time for a Wellness Break", "Take a few minutes for yourself", "intervention",
    "It's been a while since your last wellness activity. Regular practice builds resilience", 4,
    "wellness-break-suggestion",
)
STREAK_ENCOURAGEMENT = Candidate(
    "activity", "You're on a Roll!", "Keep up the great work with your wellness practice", "encouragement",
    "You've been feeling positive lately. This is a great time to build on your momentum", 3,
    "streak-encouragement",
)
ACTIVITY_TEMPLATES = (
    Candidate(
        "activity", "Mindful Walking", "Take a 5-minute mindful walk to clear your mind", "intervention",
        "Physical movement combined with mindfulness can help reduce stress and improve mood", 3,
        "mindful-walking-5min",
    ),
    Candidate(
        "activity", "Gratitude Journal", "Write down three things you're grateful for today", "activity",
        "Practicing gratitude has been shown to improve mental well-being and reduce stress", 3,
        "gratitude-journal",
    ),
    Candidate(
        "activity", "Body Scan Meditation", "A 3-minute body scan to release tension", "meditation",
        "This practice helps you become more aware of physical sensations and release tension", 3,
        "body-scan-3min",
    ),
)

CONTENT_TEMPLATES = (
    Candidate(
        "content", "Understanding Anxiety", "Learn about anxiety symptoms and evidence-based coping strategies",
        "article", "Knowledge about anxiety can help you better understand and manage your symptoms", 3,
        "understanding-anxiety-guide",
    ),
    Candidate(
        "content", "Stress Management Techniques", "Evidence-based techniques for stress reduction and management",
        "article", "Learning stress management techniques can help you build resilience", 3,
        "stress-management-techniques",
    ),
    Candidate(
        "content", "Building Resilience",
        "Practical strategies to strengthen mental resilience and emotional well-being", "article",
        "Building resilience helps you better cope with life's challenges", 3, "building-resilience-daily",
    ),
)

JOIN_CONVERSATION = Candidate(
    "community", "Join the Conversation", "Connect with others on similar wellness journeys", "community_post",
    "Sharing experiences can provide support and new perspectives", 3, "community-encouragement",
)
NOT_ALONE = Candidate(
    "community", "You're Not Alone", "Connect with others who understand what you're going through",
    "community_support", "Many others are experiencing similar feelings. Community support can help", 4,
    "anxiety-support-community",
)
COMMUNITY_TEMPLATES = (
    Candidate(
        "community", "Wellness Stories", "Read inspiring stories from others on their wellness journey",
        "community_content", "Hearing others' experiences can provide motivation and new perspectives", 3,
        "wellness-stories",
    ),
    Candidate(
        "community", "Daily Check-in", "Share your daily wellness progress with the community",
        "community_activity", "Regular check-ins help build accountability and connection", 3, "daily-checkin",
    ),
    Candidate(
        "community", "Support Group", "Join a supportive group for ongoing encouragement", "community_group",
        "Being part of a supportive community can enhance your wellness journey", 3, "support-group",
    ),
)


def has_consecutive_days(entries: List[MoodEntry], today: date) -> bool:
    """True if two adjacent UTC days among the last week both have an entry."""
    if len(entries) < 2:
        return False
    logged_days = {entry.created_at.date() for entry in entries}
    for i in range(6):
        day = today - timedelta(days=i)
        if day in logged_days and day - timedelta(days=1) in logged_days:
            return True
    return False


def days_since(moment: datetime, now: datetime) -> int:
    return math.ceil(abs((now - moment).total_seconds()) / 86400)


class PersonalizedRecommendationEngine:
    """Rule-based recommendation generator.

    Args:
        repos: Repositories bound to the current request's session
        clock: Returns the current naive UTC time; injectable for tests
    """

    def __init__(self, repos: SqlRepoBundle, clock: Callable[[], datetime] = utc_now) -> None:
        self.repos = repos
        self.clock = clock

    async def generate_recommendations(self, user_id: int) -> List[Recommendation]:
        """Return up to ``MAX_RECOMMENDATIONS`` active rows, creating new ones as needed.

        Database failures are logged and produce an empty list.
        """
        try:
            return await self._generate(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error generating recommendations for user {user_id}: {e}", exc_info=True)
            log_error("RecommendationGenerationError", str(e), {"user_id": user_id})
            await self.repos.recommendations.session.rollback()
            return []

    async def _generate(self, user_id: int) -> List[Recommendation]:
        now = self.clock()

        week_entries = await self.repos.moods.list_since(user_id, now - GATE_WINDOW)
        if not has_consecutive_days(week_entries, now.date()):
            logger.debug(f"User {user_id} has no consecutive mood logs, skipping recommendations")
            return []

        existing = await self.repos.recommendations.list_active(user_id, now)
        if len(existing) >= MAX_RECOMMENDATIONS:
            return existing[:MAX_RECOMMENDATIONS]

        snapshot = await self._snapshot(user_id)
        patterns = MoodPatterns.from_entries(await self.repos.moods.list_since(user_id, now - PATTERN_WINDOW))

        candidates: List[Candidate] = []
        candidates += self.mood_based_candidates(snapshot, patterns, now)
        candidates += self.activity_candidates(snapshot, patterns, now)
        candidates += await self.content_candidates(snapshot, patterns)
        candidates += self.community_candidates(snapshot, patterns)

        chosen = select_new_candidates(candidates, existing, MAX_RECOMMENDATIONS - len(existing))
        created = await self.repos.recommendations.create_many([c.to_entity(user_id, now) for c in chosen])

        logger.info(f"User {user_id}: {len(existing)} active recommendations, {len(created)} created")
        log_recommendations_generated(user_id, len(existing), len(created))
        return (existing + created)[:MAX_RECOMMENDATIONS]

    async def _snapshot(self, user_id: int) -> UserSnapshot:
        return UserSnapshot(
            user_id=user_id,
            recent_moods=await self.repos.moods.list_for_user(user_id, limit=7),
            recent_interventions=await self.repos.interventions.list_for_user(user_id, limit=10),
            preferences=await self.get_user_preferences(user_id),
            post_count=len(await self.repos.posts.list_for_user(user_id, limit=5)),
        )

    def mood_based_candidates(self, snapshot: UserSnapshot, patterns: MoodPatterns, now: datetime) -> List[Candidate]:
        latest = snapshot.recent_moods[0] if snapshot.recent_moods else None
        mood = latest.mood if latest else patterns.most_frequent_mood
        secondary = latest.secondary_mood if latest else None
        intensity = latest.intensity if latest else patterns.average_intensity
        hour = now.hour

        out: List[Candidate] = []
        if 6 <= hour < 11:
            if mood in ("anxious", "stressed"):
                out.append(
                    Candidate(
                        "intervention", "Morning Calm",
                        "Start your day with a gentle breathing exercise to center yourself", "breathing",
                        f"Based on your {mood} mood, this morning breathing exercise can help set a positive "
                        "tone for your day",
                        5, "morning-breathing-5min",
                    )
                )
            elif mood in ("joy", "calm"):
                out.append(GRATITUDE_MEDITATION)
            out.append(MINDFUL_MORNING)

        if 12 <= hour < 17:
            if mood == "stressed" or intensity > 3:
                out.append(QUICK_RESET)
            out.append(ENERGY_BOOST)

        if 18 <= hour < 23:
            if mood in ("anxious", "stressed"):
                out.append(EVENING_WIND_DOWN)
            out.append(PROGRESSIVE_RELAXATION)

        if mood == "anxious":
            out.append(ANXIETY_RELIEF)
        if mood == "stressed":
            out.append(STRESS_RELEASE)

        if secondary and (mood, secondary) in SECONDARY_MOOD_TEMPLATES:
            out.append(SECONDARY_MOOD_TEMPLATES[(mood, secondary)])
        return out

    def activity_candidates(self, snapshot: UserSnapshot, patterns: MoodPatterns, now: datetime) -> List[Candidate]:
        out: List[Candidate] = []
        today = now.date()
        if not any(entry.created_at.date() == today for entry in snapshot.recent_moods):
            out.append(MOOD_CHECK_IN)

        completed = [i for i in snapshot.recent_interventions if i.completed]
        last = completed[0] if completed else None
        if last is None or last.completed_at is None or days_since(last.completed_at, now) > 2:
            out.append(WELLNESS_BREAK)

        if patterns.total_entries >= 3:
            positive = sum(1 for entry in snapshot.recent_moods if entry.mood in ("joy", "calm"))
            if positive >= 2:
                out.append(STREAK_ENCOURAGEMENT)

        out.extend(ACTIVITY_TEMPLATES)
        return out

    async def content_candidates(self, snapshot: UserSnapshot, patterns: MoodPatterns) -> List[Candidate]:
        prefs = snapshot.preferences
        content_types = prefs.get("preferred_content_types") or []
        max_duration = prefs.get("preferred_duration") or 0

        catalog = await self.repos.content.list_catalog(limit=10)
        preferred = [
            item for item in catalog if item.content_type in content_types or max_duration >= (item.duration or 0)
        ]

        out: List[Candidate] = []
        match = next((item for item in preferred if item.targets(patterns.most_frequent_mood)), None)
        if match is not None:
            out.append(
                Candidate(
                    "content", match.title, match.description or "", match.content_type,
                    f"Based on your mood patterns, this {match.content_type} might be helpful", 4, match.content_id,
                )
            )
        out.extend(CONTENT_TEMPLATES)
        return out

    def community_candidates(self, snapshot: UserSnapshot, patterns: MoodPatterns) -> List[Candidate]:
        out: List[Candidate] = []
        if snapshot.post_count == 0:
            out.append(JOIN_CONVERSATION)
        if patterns.most_frequent_mood in ("anxious", "stressed"):
            out.append(NOT_ALONE)
        out.extend(COMMUNITY_TEMPLATES)
        return out

    async def get_user_preferences(self, user_id: int) -> Dict[str, Any]:
        """Stored preferences with unset fields filled from the defaults."""
        stored = await self.repos.preferences.get_for_user(user_id)
        prefs = copy.deepcopy(DEFAULT_PREFERENCES)
        if stored is not None:
            for key in DEFAULT_PREFERENCES:
                value = getattr(stored, key)
                if value is not None:
                    prefs[key] = value
        return prefs

    async def update_user_preferences(self, user_id: int, values: Dict[str, Any]) -> Dict[str, Any]:
        await self.repos.preferences.upsert(user_id, {k: v for k, v in values.items() if v is not None})
        logger.info(f"Updated recommendation preferences of user {user_id}")
        return await self.get_user_preferences(user_id)

    async def track_interaction(self, recommendation_id: Union[int, str], action: InteractionAction) -> bool:
        """Record a click or dismissal.

        Ids that are not numeric come from client-side fallback cards and are only logged.

        Returns:
            True if a stored row was updated
        """
        if isinstance(recommendation_id, str):
            if not recommendation_id.isdecimal():
                logger.info(f"Tracking interaction for fallback recommendation {recommendation_id}: {action.value}")
                return False
            recommendation_id = int(recommendation_id)

        if recommendation_id > MAX_ROW_ID:
            logger.warning(f"Interaction '{action.value}' for out-of-range recommendation id {recommendation_id}")
            return False

        updated = await self.repos.recommendations.mark_interaction(recommendation_id, action.value)
        if not updated:
            logger.warning(f"Interaction '{action.value}' for unknown recommendation {recommendation_id}")
        return updated


def select_new_candidates(
    candidates: List[Candidate], existing: List[Recommendation], limit: int
) -> List[Candidate]:
    """Drop candidates already shown or already chosen, then keep the ``limit`` highest priorities.

    The sort is stable, so equal priorities keep generator order.
    """
    used = {rec.content_id for rec in existing}
    unique: List[Candidate] = []
    for candidate in candidates:
        if candidate.content_id in used:
            continue
        used.add(candidate.content_id)
        unique.append(candidate)
    unique.sort(key=lambda c: c.priority, reverse=True)
    return unique[: max(limit, 0)]
