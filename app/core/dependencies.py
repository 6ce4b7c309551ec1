"""
FastAPI dependencies.
"""
from pathlib import Path
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.database.session_manager.db_session import Database
from app.services.factors.stores import (
    DatabaseSettingsStore,
    JsonFileSettingsStore,
    SettingsStore,
)
from app.utils.constants import FactorStoreBackend


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session that commits when the request succeeds."""
    async with Database() as session:
        yield session


def get_app_config(request: Request) -> Config:
    """Configuration attached to the running application."""
    return request.app.state.config


def get_settings_store(
    config: Config = Depends(get_app_config),
    session: AsyncSession = Depends(get_db_session),
) -> SettingsStore:
    """Select the storage backend holding the emission factor table."""
    factors_config = config.data.get("factors", {})
    backend = FactorStoreBackend(
        factors_config.get("backend", FactorStoreBackend.DATABASE.value)
    )

    if backend is FactorStoreBackend.FILE:
        return JsonFileSettingsStore(Path(factors_config["file_path"]))

    return DatabaseSettingsStore(session)
