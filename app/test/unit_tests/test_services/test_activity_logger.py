"""
Service tests for activity logging.
"""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import select

from app.database.schemas import ActivityDBModel, RewardTransactionDBModel
from app.pydantic_models.activity import ActivityLogRequest
from app.pydantic_models.calculation import ActivityInput
from app.pydantic_models.emission_factor import EmissionFactorTable
from app.services.activity_logger import ActivityLoggingService, earn_reason
from app.services.exceptions import UserNotFoundError
from app.services.factors.factor_table import save_factors
from app.services.factors.stores import DatabaseSettingsStore
from app.test.factory.user import UserFactory
from app.utils.constants import TransactionType


def _request(user_id, **overrides) -> ActivityLogRequest:
    data = {
        "user_id": user_id,
        "date": date(2024, 12, 17),
        "travel_mode": "Bus",
        "distance_km": 15,
        "food_item": "Veg",
        "electricity_kwh": 2.5,
    }
    data.update(overrides)
    return ActivityLogRequest(**data)


def test_earn_reason():
    assert earn_reason(4.35, 5.0) == "Low daily emissions (4.3 kg CO₂)"
    assert earn_reason(5.0, 5.0) == "Low daily emissions (5.0 kg CO₂)"
    assert earn_reason(8.8, 5.0) == "Daily activity logged"


@pytest.mark.asyncio
async def test_log_low_emission_day(test_db_session):
    user = await UserFactory(reward_points=10, total_emissions=Decimal("1.5"))
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))

    logged = await service.log_activity(user.id, _request(user.id))

    assert logged.emissions.total_emissions == 4.35
    assert logged.points_earned == 113
    assert logged.activity.total_emissions == Decimal("4.35")
    assert logged.activity.distance_km == Decimal("15")
    assert logged.transaction.type == TransactionType.EARN.value
    assert logged.transaction.points == 113
    assert logged.transaction.reason == "Low daily emissions (4.3 kg CO₂)"

    refreshed = await service.users.get_by_id(user.id)
    assert refreshed.reward_points == 123
    assert refreshed.total_emissions == Decimal("5.85")


@pytest.mark.asyncio
async def test_log_high_emission_day(test_db_session):
    user = await UserFactory()
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))

    logged = await service.log_activity(
        user.id,
        _request(user.id, travel_mode="Car", distance_km=20, food_item="Non-Veg", electricity_kwh=3.0),
    )

    assert logged.emissions.total_emissions == 8.8
    assert logged.points_earned == 6
    assert logged.transaction.reason == "Daily activity logged"


@pytest.mark.asyncio
async def test_no_transaction_when_no_points(test_db_session):
    user = await UserFactory(reward_points=7)
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))

    logged = await service.log_activity(
        user.id, _request(user.id, travel_mode="Car", distance_km=100, food_item="Red-Meat")
    )

    assert logged.points_earned == 0
    assert logged.transaction is None

    result = await test_db_session.execute(
        select(RewardTransactionDBModel).where(RewardTransactionDBModel.user_id == user.id)
    )
    assert result.scalars().all() == []

    refreshed = await service.users.get_by_id(user.id)
    assert refreshed.reward_points == 7
    assert refreshed.total_emissions == Decimal("29.25")


@pytest.mark.asyncio
async def test_invalid_quantities_are_stored_as_zero(test_db_session):
    user = await UserFactory()
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))

    logged = await service.log_activity(
        user.id, _request(user.id, distance_km="abc", electricity_kwh=-4)
    )

    assert logged.activity.distance_km == Decimal("0")
    assert logged.activity.electricity_kwh == Decimal("0")
    assert logged.emissions.total_emissions == 1.7
    assert logged.points_earned == 166


@pytest.mark.asyncio
async def test_uses_saved_factor_table(test_db_session):
    user = await UserFactory()
    store = DatabaseSettingsStore(test_db_session)
    await save_factors(
        store, EmissionFactorTable(transport={"Bus": 0.1}, food={"Veg": 2.0}, electricity=1.0)
    )
    service = ActivityLoggingService(test_db_session, store)

    logged = await service.log_activity(user.id, _request(user.id))

    assert logged.emissions.travel_emissions == 1.5
    assert logged.emissions.food_emissions == 2.0
    assert logged.emissions.electricity_emissions == 2.5
    assert logged.emissions.total_emissions == 6.0


@pytest.mark.asyncio
async def test_custom_threshold(test_db_session):
    user = await UserFactory()
    service = ActivityLoggingService(
        test_db_session, DatabaseSettingsStore(test_db_session), threshold=10.0
    )

    logged = await service.log_activity(user.id, _request(user.id))

    # 100 + round((10 - 4.35) * 20)
    assert logged.points_earned == 213


@pytest.mark.asyncio
async def test_unknown_user(test_db_session):
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))
    missing = uuid4()

    with pytest.raises(UserNotFoundError):
        await service.log_activity(missing, _request(missing))

    result = await test_db_session.execute(select(ActivityDBModel))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_preview_does_not_store_anything(test_db_session):
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))

    emissions, points = await service.preview(
        ActivityInput(travel_mode="Car", distance_km=20, food_item="Non-Veg", electricity_kwh=3.0)
    )

    assert emissions.total_emissions == 8.8
    assert points == 6

    result = await test_db_session.execute(select(ActivityDBModel))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_service_state_is_its_repositories(test_db_session):
    service = ActivityLoggingService(test_db_session, DatabaseSettingsStore(test_db_session))

    assert service.activities.session is test_db_session
    assert service.users.session is test_db_session
    assert not hasattr(service, "session")
