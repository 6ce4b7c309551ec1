"""
Pydantic models for reward points and cafeteria redemption.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import TransactionType


class CafeteriaItem(BaseModel):
    """Redeemable cafeteria voucher."""

    name: str = Field(..., description="Cafeteria code", examples=["BLU"])
    item: str = Field(..., examples=["Coffee Snack"])
    points_cost: int = Field(..., gt=0, examples=[50])


class RedemptionRequest(BaseModel):
    """Request model for redeeming points at a cafeteria."""

    user_id: UUID
    cafeteria: str = Field(..., description="Cafeteria code", examples=["BLU"])


class RewardTransactionPydModel(BaseModel):
    """Model for reward transaction response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    type: TransactionType
    points: int
    reason: str
    cafeteria: str | None = None
    item: str | None = None
    created_at: datetime
