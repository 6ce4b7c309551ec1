"""
Activity logging service.

Computes the emissions of a day's activity with the factor table in effect,
stores the activity, awards reward points and updates the user's totals.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import (
    ActivityRepository,
    RewardTransactionRepository,
    UserRepository,
)
from app.database.schemas import ActivityDBModel, RewardTransactionDBModel
from app.pydantic_models.activity import ActivityLogRequest
from app.pydantic_models.calculation import ActivityInput, EmissionResult
from app.services.calculators.emission_calculator import (
    compute_activity_emissions,
    to_decimal_breakdown,
)
from app.services.calculators.points_calculator import compute_points
from app.services.calculators.unit_converter import UnitConverter
from app.services.exceptions import UserNotFoundError
from app.services.factors.factor_table import load_factors
from app.services.factors.stores import SettingsStore
from app.utils.constants import DEFAULT_DAILY_THRESHOLD_KG, TransactionType

logger = logging.getLogger(__name__)


def earn_reason(total_emissions: float, threshold: float) -> str:
    """Ledger reason for points earned by a logged day."""
    if total_emissions <= threshold:
        return f"Low daily emissions ({total_emissions:.1f} kg CO₂)"
    return "Daily activity logged"


class LoggedActivity:
    """Everything produced by logging one activity."""

    def __init__(
        self,
        activity: ActivityDBModel,
        emissions: EmissionResult,
        points_earned: int,
        transaction: RewardTransactionDBModel | None,
    ):
        self.activity = activity
        self.emissions = emissions
        self.points_earned = points_earned
        self.transaction = transaction


class ActivityLoggingService:
    """
    Orchestrates logging a day's activity.

    All writes happen in the given session; the caller commits.
    """

    def __init__(
        self,
        session: AsyncSession,
        settings_store: SettingsStore,
        threshold: float = DEFAULT_DAILY_THRESHOLD_KG,
    ):
        self.settings_store = settings_store
        self.threshold = threshold
        self.users = UserRepository(session)
        self.activities = ActivityRepository(session)
        self.transactions = RewardTransactionRepository(session)

    async def log_activity(self, user_id: UUID, request: ActivityLogRequest) -> LoggedActivity:
        """
        Log one activity for a user.

        Args:
            user_id: User the activity belongs to
            request: Raw activity fields

        Returns:
            LoggedActivity with the stored activity, emissions, points and transaction

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.users.get_for_update(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        factors = await load_factors(self.settings_store)
        emissions = compute_activity_emissions(request, factors)
        breakdown = to_decimal_breakdown(emissions)

        activity = await self.activities.create(
            user_id=user.id,
            date=request.date,
            travel_mode=request.travel_mode,
            distance_km=UnitConverter.to_non_negative_decimal(request.distance_km),
            food_item=request.food_item,
            electricity_kwh=UnitConverter.to_non_negative_decimal(request.electricity_kwh),
            **breakdown,
        )

        points = compute_points(emissions.total_emissions, self.threshold)
        transaction = None
        if points > 0:
            transaction = await self.transactions.create(
                user_id=user.id,
                type=TransactionType.EARN.value,
                points=points,
                reason=earn_reason(emissions.total_emissions, self.threshold),
            )

        await self.users.add_to_totals(
            user, emissions_kg=breakdown["total_emissions"], points=points
        )

        logger.info(
            f"Logged activity {activity.id} for user {user.id}: "
            f"{emissions.total_emissions} kg CO2, {points} points"
        )

        return LoggedActivity(activity, emissions, points, transaction)

    async def preview(self, request: ActivityInput) -> tuple[EmissionResult, int]:
        """
        Compute emissions and potential points without storing anything.

        Returns:
            Tuple of (EmissionResult, potential points)
        """
        factors = await load_factors(self.settings_store)
        emissions = compute_activity_emissions(request, factors)
        return emissions, compute_points(emissions.total_emissions, self.threshold)

