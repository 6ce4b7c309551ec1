"""
Database package following kkb_fastapi pattern.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

from app.database.session_manager.db_session import Database  # noqa: E402

__all__ = ["Base", "Database"]
