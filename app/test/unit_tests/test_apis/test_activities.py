"""
API tests for activities endpoint following kkb_fastapi pattern.
"""

from datetime import date
from uuid import uuid4

import pytest

from app.test.factory.activity import ActivityFactory
from app.test.factory.user import UserFactory


@pytest.mark.asyncio
async def test_log_activity(test_async_client):
    """Logging a low-emission day stores it and awards points."""
    user = await UserFactory(reward_points=20)

    response = await test_async_client.post(
        "/api/v1/activities/",
        json={
            "user_id": str(user.id),
            "date": "2024-12-17",
            "travel_mode": "Bus",
            "distance_km": 15,
            "food_item": "Veg",
            "electricity_kwh": 2.5,
        },
    )
    assert response.status_code == 201

    data = response.json()
    assert data["emissions"]["total_emissions"] == 4.35
    assert data["points_earned"] == 113
    assert data["activity"]["date"] == "2024-12-17"
    assert float(data["activity"]["total_emissions"]) == 4.35
    assert data["transaction"]["type"] == "earn"
    assert data["transaction"]["points"] == 113
    assert data["transaction"]["reason"] == "Low daily emissions (4.3 kg CO₂)"

    response = await test_async_client.get(f"/api/v1/users/{user.id}")
    assert response.json()["reward_points"] == 133
    assert float(response.json()["total_emissions"]) == 4.35

    response = await test_async_client.get(f"/api/v1/activities/{data['activity']['id']}")
    assert response.status_code == 200
    assert response.json()["travel_mode"] == "Bus"


@pytest.mark.asyncio
async def test_log_activity_over_threshold_without_points(test_async_client):
    user = await UserFactory()

    response = await test_async_client.post(
        "/api/v1/activities/",
        json={
            "user_id": str(user.id),
            "travel_mode": "Car",
            "distance_km": 80,
            "food_item": "Red-Meat",
        },
    )
    assert response.status_code == 201

    data = response.json()
    assert data["emissions"]["total_emissions"] == 23.3
    assert data["points_earned"] == 0
    assert data["transaction"] is None
    assert data["activity"]["date"] == date.today().isoformat()

    response = await test_async_client.get(
        "/api/v1/rewards/transactions", params={"user_id": str(user.id)}
    )
    assert response.json() == []


@pytest.mark.asyncio
async def test_log_activity_unknown_user(test_async_client):
    response = await test_async_client.post(
        "/api/v1/activities/",
        json={"user_id": str(uuid4()), "travel_mode": "Bus", "distance_km": 1, "food_item": "Veg"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_log_activity_requires_travel_mode(test_async_client):
    user = await UserFactory()

    response = await test_async_client.post(
        "/api/v1/activities/",
        json={"user_id": str(user.id), "travel_mode": "", "food_item": "Veg"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_activities_most_recent_first(test_async_client):
    user = await UserFactory()
    other = await UserFactory()
    await ActivityFactory(user_id=user.id, date=date(2024, 12, 1))
    await ActivityFactory(user_id=user.id, date=date(2024, 12, 3))
    await ActivityFactory(user_id=user.id, date=date(2024, 12, 2))
    await ActivityFactory(user_id=other.id)

    response = await test_async_client.get(
        "/api/v1/activities/", params={"user_id": str(user.id)}
    )
    assert response.status_code == 200

    data = response.json()
    assert [a["date"] for a in data] == ["2024-12-03", "2024-12-02", "2024-12-01"]


@pytest.mark.asyncio
async def test_get_activity_not_found(test_async_client):
    response = await test_async_client.get(f"/api/v1/activities/{uuid4()}")
    assert response.status_code == 404
