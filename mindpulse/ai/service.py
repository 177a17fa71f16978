"""
Wellness AI service.

Wraps Gemini (through pydantic-ai) behind six generators used by the API:
personalized and crisis interventions, CBT prompts, mood pattern analysis,
community moderation and wellness tool selection.

Every generator degrades to a fixed, safe answer when no model is configured
or the call fails; callers never see an exception from this module.
"""

from __future__ import annotations

import time
from typing import Any, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic_ai import Agent, ModelSettings

from mindpulse.core.logging_config import get_logger
from mindpulse.core.monitoring import log_llm_call

from . import prompts
from .schemas import (
    CBTPrompt,
    ModerationResult,
    MoodInsight,
    MoodSample,
    PersonalizedIntervention,
    WellnessToolSelection,
)

logger = get_logger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

FALLBACK_INTERVENTION = PersonalizedIntervention(
    type="breathing",
    title="Gentle Breathing",
    content=(
        "Let's take a moment to breathe together. Find a comfortable position and follow along "
        "with this simple breathing exercise."
    ),
    duration=3,
    instructions=[
        "Breathe in slowly for 4 counts",
        "Hold your breath for 4 counts",
        "Exhale slowly for 6 counts",
        "Repeat this cycle 5 times",
    ],
)

FALLBACK_CBT_PROMPT = CBTPrompt(
    question="What's one thought that's been weighing on you today?",
    follow_up="Is this thought helpful or unhelpful right now?",
    reframing_technique="What would you tell a good friend who had this same thought?",
)

FALLBACK_MOOD_INSIGHT = MoodInsight(
    pattern="Building your mood history to identify patterns",
    recommendation="Keep tracking your daily moods to gain insights over time",
    confidence=0.5,
)

FALLBACK_CRISIS_INTERVENTION = PersonalizedIntervention(
    type="grounding",
    title="5-4-3-2-1 Grounding",
    content="Let's use the 5-4-3-2-1 grounding technique to help you feel more present and safe.",
    duration=2,
    instructions=[
        "Name 5 things you can see",
        "Name 4 things you can touch",
        "Name 3 things you can hear",
        "Name 2 things you can smell",
        "Name 1 thing you can taste",
    ],
)

FALLBACK_MODERATION = ModerationResult(safe=True)

FALLBACK_TOOL_SELECTION = WellnessToolSelection(
    tool1="breathing-exercise",
    tool2="sensory-grounding",
    reasoning="Breathing exercises and grounding techniques can help with difficult emotions",
)


class WellnessAIService:
    """Gemini-backed content generators with fixed fallbacks.

    Args:
        model: A pydantic-ai model instance or ``provider:model`` string. ``None``
            disables remote calls and every generator returns its fallback.
        model_name: Name reported to monitoring.
    """

    def __init__(self, model: Any | None = None, *, model_name: Optional[str] = None) -> None:
        self._model = model
        self.model_name = model_name or (model if isinstance(model, str) else getattr(model, "model_name", "none"))

    @property
    def enabled(self) -> bool:
        return self._model is not None

    async def _generate(
        self,
        operation: str,
        output_type: Type[OutputT],
        system_prompt: str,
        prompt: str,
        temperature: float,
    ) -> Optional[OutputT]:
        """Run one structured generation; ``None`` means the caller should fall back."""
        if self._model is None:
            logger.debug(f"AI model not configured, using fallback for {operation}")
            return None

        start = time.perf_counter()
        try:
            agent: Agent = Agent(self._model, output_type=output_type, system_prompt=system_prompt)
            result = await agent.run(prompt, model_settings=ModelSettings(temperature=temperature))
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error(f"AI generation '{operation}' failed: {type(e).__name__}: {e}")
            log_llm_call(operation, self.model_name, False, duration_ms)
            return None

        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"AI generation '{operation}' completed in {duration_ms:.0f}ms")
        log_llm_call(operation, self.model_name, True, duration_ms)
        return result.output

    async def generate_personalized_intervention(
        self,
        mood: str,
        intensity: int,
        recent_moods: Iterable[str],
        user_name: str,
        secondary_mood: Optional[str] = None,
    ) -> PersonalizedIntervention:
        output = await self._generate(
            "personalized_intervention",
            PersonalizedIntervention,
            prompts.INTERVENTION_SYSTEM_PROMPT,
            prompts.intervention_prompt(mood, intensity, list(recent_moods), user_name, secondary_mood),
            temperature=0.7,
        )
        return output if output is not None else FALLBACK_INTERVENTION.model_copy(deep=True)

    async def generate_cbt_prompt(
        self, mood: str, intensity: int, user_name: str, secondary_mood: Optional[str] = None
    ) -> CBTPrompt:
        output = await self._generate(
            "cbt_prompt",
            CBTPrompt,
            prompts.CBT_SYSTEM_PROMPT,
            prompts.cbt_prompt(mood, intensity, user_name, secondary_mood),
            temperature=0.7,
        )
        return output if output is not None else FALLBACK_CBT_PROMPT.model_copy(deep=True)

    async def analyze_mood_pattern(self, history: List[MoodSample]) -> MoodInsight:
        """Describe the pattern in a user's mood history.

        Confidence is clamped to [0, 1] by ``MoodInsight`` itself.
        """
        output = await self._generate(
            "mood_pattern",
            MoodInsight,
            prompts.PATTERN_SYSTEM_PROMPT,
            prompts.mood_pattern_prompt(history),
            temperature=0.3,
        )
        return output if output is not None else FALLBACK_MOOD_INSIGHT.model_copy(deep=True)

    async def generate_crisis_intervention(
        self, mood: str, intensity: int, secondary_mood: Optional[str] = None
    ) -> PersonalizedIntervention:
        output = await self._generate(
            "crisis_intervention",
            PersonalizedIntervention,
            prompts.CRISIS_SYSTEM_PROMPT,
            prompts.crisis_prompt(mood, intensity, secondary_mood),
            temperature=0.5,
        )
        return output if output is not None else FALLBACK_CRISIS_INTERVENTION.model_copy(deep=True)

    async def moderate_content(self, content: str) -> ModerationResult:
        """Classify community content. Fails open: an unavailable model lets content through."""
        output = await self._generate(
            "moderation",
            ModerationResult,
            prompts.MODERATION_SYSTEM_PROMPT,
            prompts.moderation_prompt(content),
            temperature=0.1,
        )
        if output is None:
            return FALLBACK_MODERATION.model_copy()
        if not output.safe:
            logger.info(f"Content rejected by moderation: {output.reason}")
        return output

    async def select_wellness_tools(
        self, mood: str, intensity: int, secondary_mood: Optional[str] = None
    ) -> WellnessToolSelection:
        """Pick two tools from the catalogue; unknown ids are replaced by the defaults."""
        output = await self._generate(
            "wellness_tools",
            WellnessToolSelection,
            prompts.TOOL_SELECTION_SYSTEM_PROMPT,
            prompts.tool_selection_prompt(mood, intensity, secondary_mood),
            temperature=0.3,
        )
        if output is None:
            return FALLBACK_TOOL_SELECTION.model_copy()
        if output.tool1 not in prompts.WELLNESS_TOOLS:
            logger.warning(f"Model picked unknown wellness tool '{output.tool1}', using default")
            output.tool1 = FALLBACK_TOOL_SELECTION.tool1
        if output.tool2 not in prompts.WELLNESS_TOOLS:
            logger.warning(f"Model picked unknown wellness tool '{output.tool2}', using default")
            output.tool2 = FALLBACK_TOOL_SELECTION.tool2
        return output


def create_ai_service_from_settings() -> WellnessAIService:
    """Build the service from ``GEMINI_*`` settings.

    Without ``GEMINI_API_KEY`` the service runs in fallback-only mode.
    """
    from mindpulse.server.core.config import settings

    config = settings.gemini
    if not config.api_key:
        logger.warning("GEMINI_API_KEY is not set; AI features will return fallback content")
        return WellnessAIService(None, model_name=config.model_name)

    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    model = GoogleModel(config.model, provider=GoogleProvider(api_key=config.api_key))
    logger.info(f"Wellness AI using {config.model_name}")
    return WellnessAIService(model, model_name=config.model_name)
