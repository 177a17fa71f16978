"""
API endpoints for AI wellness helpers that are not stored: CBT prompts and
wellness tool selection.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from mindpulse.ai.schemas import WellnessToolSelection
from mindpulse.core.models.io import CBTPromptEnvelope, MoodContext, UserMoodContext
from mindpulse.server.services.deps import AIServiceDep, ReposDep

router = APIRouter(tags=["wellness"])


@router.post(
    "/cbt-prompt",
    response_model=CBTPromptEnvelope,
    summary="Generate CBT Prompt",
    description="Generate a three-step thought examination exercise for the user's mood.",
    responses={404: {"description": "User not found"}},
)
async def generate_cbt_prompt(data: UserMoodContext, repos: ReposDep, ai: AIServiceDep) -> CBTPromptEnvelope:
    user = await repos.users.get_by_id(data.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    prompt = await ai.generate_cbt_prompt(data.mood.value, data.intensity, user.name, secondary_mood=data.secondary_mood)
    return CBTPromptEnvelope(prompt=prompt)


@router.post(
    "/wellness-tools/select",
    response_model=WellnessToolSelection,
    summary="Select Wellness Tools",
    description="Pick the two wellness tools best suited to the given mood and intensity.",
)
async def select_wellness_tools(data: MoodContext, ai: AIServiceDep) -> WellnessToolSelection:
    return await ai.select_wellness_tools(data.mood.value, data.intensity, secondary_mood=data.secondary_mood)
