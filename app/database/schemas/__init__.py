"""
SQLAlchemy database models (schemas).
"""
from app.database.schemas.activity import ActivityDBModel
from app.database.schemas.app_setting import AppSettingDBModel
from app.database.schemas.reward_transaction import RewardTransactionDBModel
from app.database.schemas.user import UserDBModel

__all__ = [
    "ActivityDBModel",
    "AppSettingDBModel",
    "RewardTransactionDBModel",
    "UserDBModel",
]
