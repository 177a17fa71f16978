"""
API endpoints for personalized recommendations and the preferences that
shape them.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from mindpulse.core.logging_config import get_logger
from mindpulse.core.models.io import (
    InteractionRequest,
    PreferencesEnvelope,
    PreferencesRead,
    PreferencesUpdate,
    RecommendationList,
    RecommendationRead,
    SuccessResponse,
)
from mindpulse.server.services.deps import RecommendationEngineDep

logger = get_logger(__name__)

router = APIRouter(tags=["recommendations"])


@router.get(
    "/{user_id}",
    response_model=RecommendationList,
    summary="Get Recommendations",
    description="Up to 12 active recommendations. New ones are generated once the user has logged moods "
    "on two consecutive days within the last week.",
)
async def get_recommendations(user_id: int, engine: RecommendationEngineDep) -> RecommendationList:
    recommendations = await engine.generate_recommendations(user_id)
    return RecommendationList(recommendations=[RecommendationRead.model_validate(r) for r in recommendations])


@router.get(
    "/{user_id}/preferences",
    response_model=PreferencesEnvelope,
    summary="Get Preferences",
    description="Stored recommendation preferences, or the defaults when none are stored.",
)
async def get_preferences(user_id: int, engine: RecommendationEngineDep) -> PreferencesEnvelope:
    prefs = await engine.get_user_preferences(user_id)
    return PreferencesEnvelope(preferences=PreferencesRead(user_id=user_id, **prefs))


@router.post(
    "/{user_id}/preferences",
    response_model=PreferencesEnvelope,
    summary="Update Preferences",
    description="Create or update the user's recommendation preferences.",
)
async def update_preferences(
    user_id: int, data: PreferencesUpdate, engine: RecommendationEngineDep
) -> PreferencesEnvelope:
    prefs = await engine.update_user_preferences(user_id, data.model_dump(exclude_unset=True))
    return PreferencesEnvelope(preferences=PreferencesRead(user_id=user_id, **prefs))


@router.post(
    "/{recommendation_id}/interaction",
    response_model=SuccessResponse,
    summary="Track Interaction",
    description="Record that a recommendation was clicked or dismissed. Ids of client-side fallback cards "
    "are accepted and only logged.",
    responses={400: {"description": "Invalid action"}},
)
async def track_interaction(
    recommendation_id: str, data: InteractionRequest, engine: RecommendationEngineDep
) -> SuccessResponse:
    action = data.parsed_action()
    if action is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid action")

    await engine.track_interaction(recommendation_id, action)
    return SuccessResponse()
