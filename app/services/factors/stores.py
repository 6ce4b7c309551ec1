"""
Key-value storage backends for persisted settings.

The emission factor table is stored as JSON under a fixed key in one of:
  - DatabaseSettingsStore: the ``app_settings`` table
  - JsonFileSettingsStore: a JSON object file on local disk
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import AppSettingRepository

logger = logging.getLogger(__name__)


class SettingsStore(ABC):
    """Opaque key-value slots holding serialized values."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""


class DatabaseSettingsStore(SettingsStore):
    """Settings kept in the database, within the caller's session."""

    def __init__(self, session: AsyncSession):
        self.repo = AppSettingRepository(session)

    async def get(self, key: str) -> Optional[str]:
        return await self.repo.get_value(key)

    async def set(self, key: str, value: str) -> None:
        await self.repo.set_value(key, value)


class JsonFileSettingsStore(SettingsStore):
    """
    Settings kept in a single JSON object file.

    A missing or unreadable file behaves as an empty store.
    """

    _lock = Lock()

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        except ValueError as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    async def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        logger.debug(f"Saved setting {key} to {self.path}")
