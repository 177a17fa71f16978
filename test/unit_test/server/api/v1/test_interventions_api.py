import pytest
from httpx import AsyncClient

from mindpulse.ai.service import FALLBACK_CRISIS_INTERVENTION, FALLBACK_INTERVENTION
from mindpulse.core.database.repositories import build_sql_repos_from_session

pytestmark = pytest.mark.asyncio


async def _store(client: AsyncClient, user_id: int, title: str = "Box Breathing") -> dict:
    response = await client.post(
        "/api/interventions",
        json={"userId": user_id, "type": "breathing", "title": title, "content": "In 4, hold 4", "duration": 3},
    )
    assert response.status_code == 201, response.text
    return response.json()["intervention"]


async def test_store_intervention(client: AsyncClient, user):
    intervention = await _store(client, user.id)

    assert intervention["userId"] == user.id
    assert intervention["completed"] is False
    assert intervention["completedAt"] is None


async def test_store_intervention_rejects_unknown_type(client: AsyncClient, user):
    response = await client.post(
        "/api/interventions",
        json={"userId": user.id, "type": "yoga", "title": "x", "content": "y", "duration": 3},
    )

    assert response.status_code == 422


async def test_list_interventions_newest_first(client: AsyncClient, user):
    await _store(client, user.id, "First")
    await _store(client, user.id, "Second")

    response = await client.get(f"/api/interventions/{user.id}")

    assert [i["title"] for i in response.json()["interventions"]] == ["Second", "First"]


async def test_complete_intervention_counts_progress(client: AsyncClient, user, session_maker):
    intervention = await _store(client, user.id)

    response = await client.patch(f"/api/interventions/{intervention['id']}/complete")

    assert response.status_code == 200
    body = response.json()["intervention"]
    assert body["completed"] is True
    assert body["completedAt"] is not None
    async with session_maker() as session:
        progress = await build_sql_repos_from_session(session=session).progress.get_for_user(user.id)
    assert progress.total_interventions == 1


async def test_complete_unknown_intervention(client: AsyncClient):
    response = await client.patch("/api/interventions/777/complete")

    assert response.status_code == 404
    assert response.json() == {"detail": "Intervention not found"}


async def test_generate_intervention_falls_back_without_model(client: AsyncClient, user):
    response = await client.post(
        "/api/interventions/generate", json={"userId": user.id, "mood": "anxious", "intensity": 4}
    )

    assert response.status_code == 200
    assert response.json()["intervention"]["title"] == FALLBACK_INTERVENTION.title


async def test_generate_intervention_unknown_user(client: AsyncClient):
    response = await client.post("/api/interventions/generate", json={"userId": 99, "mood": "calm", "intensity": 2})

    assert response.status_code == 404


async def test_crisis_intervention(client: AsyncClient):
    response = await client.post(
        "/api/interventions/crisis", json={"mood": "anxious", "intensity": 5, "secondaryMood": "panicked"}
    )

    assert response.status_code == 200
    intervention = response.json()["intervention"]
    assert intervention["type"] == "grounding"
    assert intervention["title"] == FALLBACK_CRISIS_INTERVENTION.title
    assert len(intervention["instructions"]) == 5
