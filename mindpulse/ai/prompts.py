"""
Prompt texts for the wellness AI generators.

Each generator has a system prompt (the model's standing role) and a user
prompt builder parameterized by the user's mood.
"""

from __future__ import annotations

import json
from typing import Iterable, List, Optional

from .schemas import MoodSample

INTERVENTION_SYSTEM_PROMPT = (
    "You are a specialized mental health AI that creates personalized, evidence-based micro-interventions. "
    "Always prioritize safety and provide gentle, supportive guidance."
)

CBT_SYSTEM_PROMPT = (
    "You are a CBT-trained mental health AI that creates gentle, evidence-based thought examination exercises."
)

PATTERN_SYSTEM_PROMPT = (
    "You are a mental health analytics AI that identifies patterns in mood data "
    "and provides evidence-based recommendations."
)

CRISIS_SYSTEM_PROMPT = (
    "You are a crisis intervention AI that provides immediate, safe, and effective interventions "
    "for acute mental health distress."
)

MODERATION_SYSTEM_PROMPT = (
    "You are a content moderation AI for a mental health support community. Flag content that contains "
    "self-harm, suicide ideation, harassment, or inappropriate content. Allow supportive, helpful content."
)

TOOL_SELECTION_SYSTEM_PROMPT = (
    "You are a mental health AI that selects the most appropriate wellness tools based on emotional state "
    "and intensity. Prioritize safety and immediate effectiveness."
)

WELLNESS_TOOLS = {
    "breathing-exercise": ("Breathing Exercise", "Immediate calming through controlled breathing"),
    "sensory-grounding": ("Sensory Grounding", "5-4-3-2-1 grounding technique for acute distress"),
    "quick-meditation": ("Quick Meditation", "2-minute guided meditation for stress relief"),
    "cbt-thought-record": ("CBT Thought Record", "Structured thought examination and reframing"),
    "crisis-safety-planning": ("Crisis Safety Planning", "Create personalized safety plans"),
    "gratitude-journal": ("Gratitude Journal", "Shift focus to positive aspects"),
    "body-scan-meditation": ("Body Scan Meditation", "Progressive relaxation for physical tension"),
    "self-care-menu": ("Self-Care Menu", "AI-powered personalized suggestions"),
}

ACUTE_SECONDARY_MOODS = ("overwhelmed", "panicked")


def describe_mood(mood: str, secondary_mood: Optional[str] = None) -> str:
    return f"{mood} and {secondary_mood}" if secondary_mood else mood


def intervention_prompt(
    mood: str, intensity: int, recent_moods: Iterable[str], user_name: str, secondary_mood: Optional[str] = None
) -> str:
    lines = [
        f"Create a personalized micro-intervention for {user_name} who is currently feeling "
        f"{describe_mood(mood, secondary_mood)} at intensity {intensity}/5.",
        "",
        f"Recent mood patterns: {', '.join(recent_moods)}",
        "",
        "Create a 2-5 minute intervention that is:",
        "- Evidence-based (CBT, mindfulness, or breathing techniques)",
        "- Appropriate for the current mood combination and intensity",
        "- Practical and immediately actionable",
        "- Supportive and non-judgmental",
    ]
    if secondary_mood:
        lines += [
            "",
            f"Note: The user is feeling both {mood} and {secondary_mood}. Consider how these emotions interact "
            "and create an intervention that addresses both aspects.",
        ]
    lines += ["", "The type must be one of breathing, cbt, meditation or grounding; duration is in minutes."]
    return "\n".join(lines)


def cbt_prompt(mood: str, intensity: int, user_name: str, secondary_mood: Optional[str] = None) -> str:
    lines = [
        f"Create a gentle CBT-inspired thought examination prompt for {user_name} who is feeling "
        f"{describe_mood(mood, secondary_mood)} at intensity {intensity}/5.",
        "",
        "The prompt should:",
        "- Help identify negative thought patterns",
        "- Provide gentle questioning to examine thoughts",
        "- Offer reframing techniques",
        "- Be supportive and non-judgmental",
    ]
    if secondary_mood:
        lines += [
            "",
            f"Consider how the combination of {mood} and {secondary_mood} might affect thought patterns and "
            "create a prompt that addresses both emotional aspects.",
        ]
    return "\n".join(lines)


def mood_pattern_prompt(history: List[MoodSample]) -> str:
    data = [
        {
            "mood": sample.mood,
            "secondaryMood": sample.secondary_mood,
            "intensity": sample.intensity,
            # Sunday is day 0
            "dayOfWeek": (sample.date.weekday() + 1) % 7,
            "timeOfDay": sample.date.hour,
        }
        for sample in history
    ]
    return "\n".join(
        [
            "Analyze this mood pattern data and provide insights:",
            json.dumps(data),
            "",
            "Look for:",
            "- Patterns in mood changes and combinations",
            "- Time-based trends",
            "- Intensity variations",
            "- Secondary emotion patterns",
            "- Actionable recommendations based on emotional complexity",
            "",
            "Confidence is a number between 0 and 1.",
        ]
    )


def crisis_prompt(mood: str, intensity: int, secondary_mood: Optional[str] = None) -> str:
    lines = [
        f"Create an immediate crisis intervention for someone feeling "
        f"{describe_mood(mood, secondary_mood)} at intensity {intensity}/5.",
        "",
        "This should be:",
        "- Immediately actionable (1-3 minutes)",
        "- Grounding and calming",
        "- Safe and evidence-based",
        "- Designed for acute distress",
    ]
    if secondary_mood in ACUTE_SECONDARY_MOODS:
        lines += ["", "This person is in acute distress and needs immediate grounding techniques."]
    lines += ["", "The type must be one of grounding, breathing or cbt; duration is in minutes."]
    return "\n".join(lines)


def moderation_prompt(content: str) -> str:
    return "\n".join(
        [
            f'Please moderate this content for a mental health support community: "{content}"',
            "",
            "Flag content that contains:",
            "- Self-harm or suicide ideation",
            "- Harassment or bullying",
            "- Inappropriate or harmful content",
            "",
            "Allow supportive, helpful content. Give a reason when the content is not safe.",
        ]
    )


def tool_selection_prompt(mood: str, intensity: int, secondary_mood: Optional[str] = None) -> str:
    tools = "\n".join(f"- {name} ({tool_id}): {description}" for tool_id, (name, description) in WELLNESS_TOOLS.items())
    return "\n".join(
        [
            f"A user is experiencing {describe_mood(mood, secondary_mood)} at intensity {intensity}/5.",
            "",
            "Available wellness tools:",
            tools,
            "",
            "Select the TWO most appropriate tools for this specific emotional state and intensity level. Consider:",
            "- For high intensity (4-5): Immediate grounding and crisis tools",
            "- For moderate intensity (3): Breathing and meditation tools",
            "- For anxiety/stress: Breathing and grounding tools",
            "- For depression/low mood: Gratitude and CBT tools",
            "- For overwhelming feelings: Crisis planning and grounding tools",
            "",
            "Answer with the tool ids given in parentheses.",
        ]
    )
