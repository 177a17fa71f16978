"""
API endpoints for interventions.

Stored interventions (created, listed, completed) and on-demand AI
interventions, including the crisis variant for acute distress.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from mindpulse.core.database.entities import Intervention
from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.io import (
    GeneratedIntervention,
    InterventionCreate,
    InterventionEnvelope,
    InterventionList,
    InterventionRead,
    MoodContext,
    UserMoodContext,
)
from mindpulse.server.services.deps import AIServiceDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["interventions"])


@router.post(
    "",
    response_model=InterventionEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Store Intervention",
    description="Store an intervention shown to a user so it can later be completed.",
)
async def create_intervention(data: InterventionCreate, repos: ReposDep) -> InterventionEnvelope:
    intervention = await repos.interventions.create(
        Intervention(
            user_id=data.user_id,
            type=data.type.value,
            title=data.title,
            content=data.content,
            duration=data.duration,
        )
    )
    return InterventionEnvelope(intervention=InterventionRead.model_validate(intervention))


@router.post(
    "/generate",
    response_model=GeneratedIntervention,
    summary="Generate Intervention",
    description="Generate a personalized intervention for the user's current mood and recent history.",
    responses={404: {"description": "User not found"}},
)
async def generate_intervention(data: UserMoodContext, repos: ReposDep, ai: AIServiceDep) -> GeneratedIntervention:
    user = await repos.users.get_by_id(data.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    recent = await repos.moods.list_for_user(data.user_id, limit=5)
    intervention = await ai.generate_personalized_intervention(
        data.mood.value,
        data.intensity,
        [m.mood for m in recent],
        user.name,
        secondary_mood=data.secondary_mood,
    )
    return GeneratedIntervention(intervention=intervention)


@router.post(
    "/crisis",
    response_model=GeneratedIntervention,
    summary="Generate Crisis Intervention",
    description="Generate an immediate 1-3 minute grounding intervention for acute distress.",
)
async def generate_crisis_intervention(data: MoodContext, ai: AIServiceDep) -> GeneratedIntervention:
    logger.info(f"Crisis intervention requested (mood={data.mood.value}, intensity={data.intensity})")
    intervention = await ai.generate_crisis_intervention(
        data.mood.value, data.intensity, secondary_mood=data.secondary_mood
    )
    return GeneratedIntervention(intervention=intervention)


@router.get(
    "/{user_id}",
    response_model=InterventionList,
    summary="List Interventions",
    description="All interventions of a user, newest first.",
)
async def list_interventions(user_id: int, repos: ReposDep) -> InterventionList:
    interventions = await repos.interventions.list_for_user(user_id)
    return InterventionList(interventions=[InterventionRead.model_validate(i) for i in interventions])


@router.patch(
    "/{intervention_id}/complete",
    response_model=InterventionEnvelope,
    summary="Complete Intervention",
    description="Mark an intervention completed and count it in the owner's progress.",
    responses={404: {"description": "Intervention not found"}},
)
async def complete_intervention(intervention_id: int, repos: ReposDep) -> InterventionEnvelope:
    intervention = await repos.interventions.get_by_id(intervention_id)
    if intervention is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Intervention not found")

    intervention = await repos.interventions.mark_completed(intervention)
    await repos.progress.increment_interventions(intervention.user_id)
    return InterventionEnvelope(intervention=InterventionRead.model_validate(intervention))
