"""
Pydantic models for campus users.
"""
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import UserRole


class UserBase(BaseModel):
    """Base user model."""

    full_name: str = Field(..., min_length=1, max_length=200, examples=["Alice Johnson"])
    college_id: str = Field(..., min_length=1, max_length=50, examples=["CS2021001"])
    email: str | None = Field(None, max_length=255, examples=["alice@university.edu"])
    phone: str = Field(..., min_length=1, max_length=30, examples=["+1234567890"])
    role: UserRole = Field(UserRole.STUDENT)


class UserCreate(UserBase):
    """Model for creating a user."""


class UserPydModel(UserBase):
    """Model for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reward_points: int
    total_emissions: Decimal
    created_at: datetime
