"""
Database base configuration following kkb_fastapi pattern.

Builds the async database URL from config and applies Alembic migrations.
"""
import asyncio
import functools
import logging
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config as alembic_config
from sqlalchemy.engine.url import URL

from app.core.config import Config

engine_kw = {
    "pool_pre_ping": True,
    # feature will normally emit SQL equivalent to "SELECT 1" each time a connection is checked out from the pool
    "pool_size": 2,  # number of connections to keep open at a time
    "max_overflow": 4,  # number of connections to allow to be opened above pool_size
    "connect_args": {
        "prepared_statement_cache_size": 0,  # disable prepared statement cache
        "statement_cache_size": 0,  # disable statement cache
    },
}

# Sync driver used by Alembic for each async driver
SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql",
    "sqlite+aiosqlite": "sqlite",
}


def get_db_url(config: Config) -> URL:
    """
    Construct database URL from config.
    """
    config_db = dict(config.data["db"])
    drivername = config_db.pop("drivername", "postgresql+asyncpg")
    return URL.create(drivername=drivername, **config_db)


def get_engine_kw(async_db_url: URL) -> dict[str, Any]:
    """
    Engine keyword arguments for the given URL.

    Pool sizing and asyncpg statement-cache options only apply to PostgreSQL.
    """
    if async_db_url.drivername.startswith("postgresql"):
        return engine_kw
    return {}


async def apply_db_migration(config: Config):
    """
    Apply database migrations before the application starts serving.

    Args:
        config: The application configuration containing database connection details.
    """
    alembic_cfg = alembic_config(str(Path.cwd() / "alembic.ini"))
    alembic_cfg.set_main_option(
        "script_location", str(Path.cwd() / "alembic_migrations")
    )

    async_url = get_db_url(config)
    sync_url = async_url.set(
        drivername=SYNC_DRIVERS.get(async_url.drivername, async_url.drivername)
    )
    alembic_cfg.set_main_option(
        "sqlalchemy.url", sync_url.render_as_string(hide_password=False)
    )

    # Alembic is synchronous; run it off the event loop
    logging.info("Starting database migrations...")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None, functools.partial(command.upgrade, alembic_cfg, "head")
    )
    logging.info("Database migration completed successfully")
