"""
Pydantic models for logged activities following kkb_fastapi pattern.
"""

from datetime import date as DateType
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.pydantic_models.calculation import ActivityInput, EmissionResult
from app.pydantic_models.reward import RewardTransactionPydModel


class ActivityLogRequest(ActivityInput):
    """Request model for logging a day's activity."""

    user_id: UUID = Field(..., description="User logging the activity")
    date: DateType = Field(
        default_factory=DateType.today,
        description="Date of activity",
        examples=["2024-12-17"],
    )
    travel_mode: str = Field(..., min_length=1, max_length=100, examples=["Bus"])
    food_item: str = Field(..., min_length=1, max_length=100, examples=["Veg"])


class ActivityPydModel(BaseModel):
    """Model for activity response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    date: DateType
    travel_mode: str
    distance_km: Decimal
    food_item: str
    electricity_kwh: Decimal
    travel_emissions: Decimal
    food_emissions: Decimal
    electricity_emissions: Decimal
    total_emissions: Decimal
    created_at: datetime


class ActivityLogResponse(BaseModel):
    """Result of logging an activity."""

    activity: ActivityPydModel
    emissions: EmissionResult
    points_earned: int = Field(..., ge=0)
    transaction: RewardTransactionPydModel | None = Field(
        None, description="Earn transaction, absent when no points were awarded"
    )
