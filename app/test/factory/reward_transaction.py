"""
Factory for RewardTransaction models following kkb_fastapi pattern.
"""
import uuid
from datetime import datetime

import factory

from app.database.schemas import RewardTransactionDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session
from app.utils.constants import TransactionType


class RewardTransactionFactory(AsyncSQLAlchemyFactory):
    """Factory for creating earn transactions; pass ``user_id``."""

    class Meta:
        model = RewardTransactionDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    type = TransactionType.EARN.value
    points = 113
    reason = "Low daily emissions (4.3 kg CO₂)"
    cafeteria = None
    item = None
    created_at = factory.LazyFunction(datetime.utcnow)
