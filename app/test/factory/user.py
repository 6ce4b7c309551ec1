"""
Factory for User models following kkb_fastapi pattern.
"""
import uuid
from datetime import datetime
from decimal import Decimal

import factory

from app.database.schemas import UserDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session
from app.utils.constants import UserRole


class UserFactory(AsyncSQLAlchemyFactory):
    """Factory for creating User test instances."""

    class Meta:
        model = UserDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    full_name = factory.Sequence(lambda n: f"Test User {n}")
    college_id = factory.Sequence(lambda n: f"CS2024{n:03d}")
    email = factory.Sequence(lambda n: f"user{n}@university.edu")
    phone = factory.Sequence(lambda n: f"+1555000{n:04d}")
    role = UserRole.STUDENT.value
    reward_points = 0
    total_emissions = Decimal("0")
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)


class StaffUserFactory(UserFactory):
    """Factory for staff users."""

    role = UserRole.STAFF.value
    college_id = factory.Sequence(lambda n: f"STAFF{n:03d}")
