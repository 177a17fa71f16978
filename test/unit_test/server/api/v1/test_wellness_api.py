import pytest
from httpx import AsyncClient

from mindpulse.ai.prompts import WELLNESS_TOOLS
from mindpulse.ai.service import FALLBACK_CBT_PROMPT

pytestmark = pytest.mark.asyncio


async def test_cbt_prompt(client: AsyncClient, user):
    response = await client.post("/api/cbt-prompt", json={"userId": user.id, "mood": "stressed", "intensity": 3})

    assert response.status_code == 200
    prompt = response.json()["prompt"]
    assert prompt["question"] == FALLBACK_CBT_PROMPT.question
    assert prompt["followUp"] == FALLBACK_CBT_PROMPT.follow_up
    assert prompt["reframingTechnique"] == FALLBACK_CBT_PROMPT.reframing_technique


async def test_cbt_prompt_unknown_user(client: AsyncClient):
    response = await client.post("/api/cbt-prompt", json={"userId": 404, "mood": "calm", "intensity": 1})

    assert response.status_code == 404


async def test_select_wellness_tools(client: AsyncClient):
    response = await client.post("/api/wellness-tools/select", json={"mood": "anxious", "intensity": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["tool1"] in WELLNESS_TOOLS
    assert body["tool2"] in WELLNESS_TOOLS
    assert body["reasoning"]


async def test_select_wellness_tools_validates_intensity(client: AsyncClient):
    response = await client.post("/api/wellness-tools/select", json={"mood": "anxious", "intensity": 9})

    assert response.status_code == 422
