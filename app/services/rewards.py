"""
Reward redemption service.

Spends reward points on cafeteria vouchers.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import RewardTransactionRepository, UserRepository
from app.database.schemas import RewardTransactionDBModel
from app.pydantic_models.reward import CafeteriaItem
from app.services.exceptions import (
    InsufficientPointsError,
    UnknownCafeteriaItemError,
    UserNotFoundError,
)
from app.utils.constants import CAFETERIA_ITEMS, TransactionType

logger = logging.getLogger(__name__)


def get_cafeteria_items() -> list[CafeteriaItem]:
    """Redeemable cafeteria vouchers, cheapest first."""
    items = [
        CafeteriaItem(name=name, item=item, points_cost=cost)
        for name, item, cost in CAFETERIA_ITEMS
    ]
    return sorted(items, key=lambda item: item.points_cost)


class RewardRedemptionService:
    """Redeems points for cafeteria vouchers within the caller's session."""

    def __init__(self, session: AsyncSession):
        self.users = UserRepository(session)
        self.transactions = RewardTransactionRepository(session)

    async def redeem(self, user_id: UUID, cafeteria: str) -> RewardTransactionDBModel:
        """
        Redeem a cafeteria voucher.

        Args:
            user_id: Redeeming user
            cafeteria: Cafeteria code from the catalog (e.g., "BLU")

        Returns:
            The redeem transaction (negative points)

        Raises:
            UnknownCafeteriaItemError: If the cafeteria is not in the catalog
            UserNotFoundError: If the user does not exist
            InsufficientPointsError: If the user's balance is too low
        """
        catalog = {item.name: item for item in get_cafeteria_items()}
        item = catalog.get(cafeteria)
        if item is None:
            raise UnknownCafeteriaItemError(cafeteria)

        user = await self.users.get_for_update(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if user.reward_points < item.points_cost:
            raise InsufficientPointsError(item.points_cost, user.reward_points)

        transaction = await self.transactions.create(
            user_id=user.id,
            type=TransactionType.REDEEM.value,
            points=-item.points_cost,
            reason=f"Redeemed {item.item}",
            cafeteria=item.name,
            item=item.item,
        )
        await self.users.add_to_totals(user, points=-item.points_cost)

        logger.info(
            f"User {user.id} redeemed {item.item} from {item.name} "
            f"for {item.points_cost} points"
        )

        return transaction
