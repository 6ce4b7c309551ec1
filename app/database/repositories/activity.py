"""
Repository for Activity database operations.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import ActivityDBModel


class ActivityRepository(BaseRepository[ActivityDBModel]):
    """Repository for logged activities."""

    def __init__(self, session: AsyncSession):
        super().__init__(ActivityDBModel, session)

    async def get_by_user(
        self, user_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[ActivityDBModel]:
        """
        Get a user's activities, most recent day first.

        Args:
            user_id: Owner of the activities
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.date.desc(), self.model.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
