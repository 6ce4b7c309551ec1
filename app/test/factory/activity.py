"""
Factory for Activity models following kkb_fastapi pattern.
"""
import uuid
from datetime import date, datetime
from decimal import Decimal

import factory

from app.database.schemas import ActivityDBModel
from app.test.factory.base_factory import AsyncSQLAlchemyFactory
from app.test.factory.create_async_session import async_session


class ActivityFactory(AsyncSQLAlchemyFactory):
    """
    Factory for creating Activity test instances.

    Pass ``user_id`` of an existing user. Defaults describe a bus day with
    default-factor emissions.
    """

    class Meta:
        model = ActivityDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    date = factory.Sequence(lambda n: date(2024, 12, 1 + n % 28))
    travel_mode = "Bus"
    distance_km = Decimal("15")
    food_item = "Veg"
    electricity_kwh = Decimal("2.5")
    travel_emissions = Decimal("0.9")
    food_emissions = Decimal("1.7")
    electricity_emissions = Decimal("1.75")
    total_emissions = Decimal("4.35")
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)
