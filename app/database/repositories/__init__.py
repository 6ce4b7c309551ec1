"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from app.database.repositories.activity import ActivityRepository
from app.database.repositories.app_setting import AppSettingRepository
from app.database.repositories.base import BaseRepository
from app.database.repositories.reward_transaction import RewardTransactionRepository
from app.database.repositories.user import UserRepository

__all__ = [
    "ActivityRepository",
    "AppSettingRepository",
    "BaseRepository",
    "RewardTransactionRepository",
    "UserRepository",
]
