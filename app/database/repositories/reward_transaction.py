"""
Repository for RewardTransaction database operations.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import RewardTransactionDBModel


class RewardTransactionRepository(BaseRepository[RewardTransactionDBModel]):
    """Repository for the reward points ledger."""

    def __init__(self, session: AsyncSession):
        super().__init__(RewardTransactionDBModel, session)

    async def get_by_user(
        self, user_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[RewardTransactionDBModel]:
        """Get a user's transactions, newest first."""
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
