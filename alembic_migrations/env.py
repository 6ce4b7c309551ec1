"""
Alembic environment.

Runs migrations against ``sqlalchemy.url``, which is set by
``app.database.base.apply_db_migration`` or built from CONFIG_FILE.
"""
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

import app.database.schemas  # noqa: F401
from app.core.config import ConfigFile, get_config
from app.database import Base
from app.database.base import SYNC_DRIVERS, get_db_url

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def get_url() -> str:
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url

    async_url = get_db_url(get_config(os.environ.get("CONFIG_FILE", ConfigFile.DEVELOPMENT)))
    sync_url = async_url.set(
        drivername=SYNC_DRIVERS.get(async_url.drivername, async_url.drivername)
    )
    return sync_url.render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
