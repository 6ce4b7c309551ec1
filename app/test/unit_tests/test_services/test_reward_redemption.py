"""
Service tests for cafeteria reward redemption.
"""

from uuid import uuid4

import pytest
from sqlalchemy import select

from app.database.schemas import RewardTransactionDBModel
from app.services.exceptions import (
    InsufficientPointsError,
    UnknownCafeteriaItemError,
    UserNotFoundError,
)
from app.services.rewards import RewardRedemptionService, get_cafeteria_items
from app.test.factory.user import UserFactory
from app.utils.constants import TransactionType


def test_cafeteria_items_sorted_by_cost():
    items = get_cafeteria_items()

    assert [item.name for item in items] == ["BLU", "CUP_OF_JOE", "NEW", "RISE"]
    assert [item.points_cost for item in items] == [50, 60, 75, 120]


@pytest.mark.asyncio
async def test_redeem_deducts_points(test_db_session):
    user = await UserFactory(reward_points=130)
    service = RewardRedemptionService(test_db_session)

    transaction = await service.redeem(user.id, "RISE")

    assert transaction.type == TransactionType.REDEEM.value
    assert transaction.points == -120
    assert transaction.reason == "Redeemed Meal Voucher"
    assert transaction.cafeteria == "RISE"
    assert transaction.item == "Meal Voucher"

    refreshed = await service.users.get_by_id(user.id)
    assert refreshed.reward_points == 10


@pytest.mark.asyncio
async def test_redeem_exact_balance(test_db_session):
    user = await UserFactory(reward_points=50)
    service = RewardRedemptionService(test_db_session)

    await service.redeem(user.id, "BLU")

    refreshed = await service.users.get_by_id(user.id)
    assert refreshed.reward_points == 0


@pytest.mark.asyncio
async def test_redeem_insufficient_points(test_db_session):
    user = await UserFactory(reward_points=74)
    service = RewardRedemptionService(test_db_session)

    with pytest.raises(InsufficientPointsError) as exc_info:
        await service.redeem(user.id, "NEW")

    assert str(exc_info.value) == "You need 75 points but only have 74"

    result = await test_db_session.execute(select(RewardTransactionDBModel))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_redeem_unknown_cafeteria(test_db_session):
    user = await UserFactory(reward_points=500)
    service = RewardRedemptionService(test_db_session)

    with pytest.raises(UnknownCafeteriaItemError):
        await service.redeem(user.id, "MOON_BASE")


@pytest.mark.asyncio
async def test_redeem_unknown_user(test_db_session):
    service = RewardRedemptionService(test_db_session)

    with pytest.raises(UserNotFoundError):
        await service.redeem(uuid4(), "BLU")


@pytest.mark.asyncio
async def test_service_state_is_its_repositories(test_db_session):
    service = RewardRedemptionService(test_db_session)

    assert service.users.session is test_db_session
    assert service.transactions.session is test_db_session
    assert not hasattr(service, "session")
