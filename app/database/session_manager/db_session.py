"""
Async database session manager following kkb_fastapi pattern.

``Database.init`` is called once (application lifespan or test fixtures);
afterwards ``async with Database() as session`` yields a session that is
committed on success and rolled back on error.
"""
import logging
from typing import Any

from sqlalchemy.engine.url import URL
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """Async session context manager backed by a class-level session maker."""

    _async_engine = None
    _async_session_maker: sessionmaker | None = None

    def __init__(self):
        self._session: AsyncSession | None = None

    @classmethod
    def init(cls, async_db_url: URL | str, engine_kw: dict[str, Any] | None = None):
        """
        Create the engine and session maker.

        Args:
            async_db_url: Async SQLAlchemy URL
            engine_kw: Extra keyword arguments for ``create_async_engine``
        """
        cls._async_engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = sessionmaker(
            bind=cls._async_engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.debug(f"Database initialized for {cls._async_engine.url.drivername}")

    async def __aenter__(self) -> AsyncSession:
        if Database._async_session_maker is None:
            raise DatabaseNotInitialized("Call Database.init() before opening a session")
        self._session = Database._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self._session.commit()
            else:
                await self._session.rollback()
        except Exception as e:
            await self._session.rollback()
            logger.error(f"Database transaction failed: {e}")
            raise DatabaseTransactionError(str(e)) from e
        finally:
            await self._session.close()

    @classmethod
    async def dispose(cls):
        """Close pooled connections and forget the session maker."""
        if cls._async_engine is not None:
            await cls._async_engine.dispose()
        cls._async_engine = None
        cls._async_session_maker = None
