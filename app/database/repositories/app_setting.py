"""
Repository for AppSetting key-value slots.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import AppSettingDBModel


class AppSettingRepository(BaseRepository[AppSettingDBModel]):
    """Repository for reading and writing named settings."""

    def __init__(self, session: AsyncSession):
        super().__init__(AppSettingDBModel, session)

    async def get_value(self, key: str) -> Optional[str]:
        """
        Get the raw value stored under ``key``.

        Returns:
            Stored value, or None when the slot is empty
        """
        stmt = select(self.model).where(self.model.key == key)
        result = await self.session.execute(stmt)
        setting = result.scalars().first()
        return setting.value if setting else None

    async def set_value(self, key: str, value: str) -> AppSettingDBModel:
        """Insert or overwrite the value stored under ``key``."""
        setting = await self.session.get(self.model, key)
        if setting is None:
            setting = self.model(key=key, value=value)
            self.session.add(setting)
        else:
            setting.value = value

        await self.session.flush()
        return setting
