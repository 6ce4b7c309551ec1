"""
Repository for User database operations.
"""
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import UserDBModel


class UserRepository(BaseRepository[UserDBModel]):
    """Repository for campus user operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(UserDBModel, session)

    async def get_by_college_id(self, college_id: str) -> Optional[UserDBModel]:
        """Get user by college / staff identifier."""
        stmt = select(self.model).where(self.model.college_id == college_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_for_update(self, user_id: UUID) -> Optional[UserDBModel]:
        """
        Get user row locked for a totals update.

        ``FOR UPDATE`` is ignored by backends without row locks (SQLite).
        """
        stmt = select(self.model).where(self.model.id == user_id).with_for_update()
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def add_to_totals(
        self,
        user: UserDBModel,
        emissions_kg: Decimal = Decimal("0"),
        points: int = 0,
    ) -> UserDBModel:
        """
        Add emissions and points to a user's cumulative totals.

        Args:
            user: User loaded in this session
            emissions_kg: Emissions to add (kg CO2)
            points: Points to add (negative for redemptions)

        Returns:
            The updated user
        """
        user.total_emissions = Decimal(user.total_emissions or 0) + emissions_kg
        user.reward_points = (user.reward_points or 0) + points
        await self.session.flush()
        return user
