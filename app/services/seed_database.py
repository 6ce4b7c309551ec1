"""
Database seeding service for demo users, activities and emission factors.

Usage:
    from app.services.seed_database import DemoDataSeeder

    async with DemoDataSeeder() as seeder:
        await seeder.seed_all(clear_existing=True)
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories import ActivityRepository, UserRepository
from app.database.session_manager.db_session import Database
from app.services.calculators.emission_calculator import (
    compute_emissions,
    to_decimal_breakdown,
)
from app.services.calculators.unit_converter import UnitConverter
from app.services.factors.factor_table import get_default_factors, save_factors
from app.services.factors.factor_text import parse_factors_from_text
from app.services.factors.stores import DatabaseSettingsStore
from app.utils.constants import FactorCategory, UserRole

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {
        "full_name": "Alice Johnson",
        "college_id": "CS2021001",
        "email": "alice@university.edu",
        "phone": "+1234567890",
        "role": UserRole.STUDENT.value,
        "reward_points": 450,
        "total_emissions": Decimal("45.2"),
        "created_at": datetime(2024, 1, 15),
    },
    {
        "full_name": "Bob Chen",
        "college_id": "CS2021002",
        "email": None,
        "phone": "+1234567891",
        "role": UserRole.STUDENT.value,
        "reward_points": 380,
        "total_emissions": Decimal("52.8"),
        "created_at": datetime(2024, 1, 16),
    },
    {
        "full_name": "Dr. Sarah Wilson",
        "college_id": "STAFF001",
        "email": "sarah.wilson@university.edu",
        "phone": "+1234567892",
        "role": UserRole.STAFF.value,
        "reward_points": 620,
        "total_emissions": Decimal("38.9"),
        "created_at": datetime(2024, 1, 10),
    },
]

# (college_id, date, travel_mode, distance_km, food_item, electricity_kwh)
DEMO_ACTIVITIES = [
    ("CS2021001", date(2024, 12, 17), "Bus", 15, "Veg", 2.5),
    ("CS2021002", date(2024, 12, 17), "Car", 20, "Non-Veg", 3.0),
]

# Factor files in the two-column text format, one per category
FACTOR_FILES = {
    FactorCategory.TRANSPORT: "transport_factors.csv",
    FactorCategory.FOOD: "food_factors.csv",
}


class DemoDataSeeder:
    """Service for seeding the database with demo data."""

    def __init__(
        self,
        session: AsyncSession | None = None,
        data_dir: str | Path | None = None,
    ):
        """
        Initialize the database seeder.

        Args:
            session: Optional async database session. If not provided, will create one.
            data_dir: Optional directory with factor files (transport_factors.csv, food_factors.csv)
        """
        self._session = session
        self._external_session = session is not None
        self.data_dir = Path(data_dir) if data_dir is not None else None

        if self.data_dir is not None and not self.data_dir.exists():
            raise ValueError(f"Data directory not found: {self.data_dir}")

    async def __aenter__(self):
        """Context manager entry."""
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    async def seed_all(self, clear_existing: bool = False) -> dict[str, Any]:
        """
        Seed factors, users and activities.

        Users and activities are only seeded into an empty users table.

        Args:
            clear_existing: If True, clear existing data before seeding

        Returns:
            Dictionary with seeding statistics
        """
        logger.info("Starting database seeding")

        stats = {
            "transport_factors": 0,
            "food_factors": 0,
            "users": 0,
            "activities": 0,
        }

        try:
            if clear_existing:
                await self._clear_existing_data()

            factor_counts = await self.seed_emission_factors()
            stats["transport_factors"] = factor_counts[FactorCategory.TRANSPORT]
            stats["food_factors"] = factor_counts[FactorCategory.FOOD]

            if await UserRepository(self.session).count() > 0:
                logger.info("Users already present, skipping demo users")
            else:
                stats["users"] = await self.seed_users()
                stats["activities"] = await self.seed_activities()

            await self.session.commit()

            logger.info(f"Database seeding completed: {stats}")
            return stats

        except Exception as e:
            logger.error(f"Error during database seeding: {e}", exc_info=True)
            await self.session.rollback()
            raise

    async def _clear_existing_data(self):
        """Clear all existing data."""
        logger.info("Clearing existing data")

        # Respect foreign key order
        await self.session.execute(text("DELETE FROM reward_transactions"))
        await self.session.execute(text("DELETE FROM activities"))
        await self.session.execute(text("DELETE FROM users"))
        await self.session.execute(text("DELETE FROM app_settings"))

        await self.session.commit()
        logger.info("Existing data cleared")

    async def seed_emission_factors(self) -> dict[FactorCategory, int]:
        """
        Save the factor table, overriding defaults with any factor files found.

        Returns:
            Number of factors per category
        """
        factors = get_default_factors()

        for category, file_name in FACTOR_FILES.items():
            if self.data_dir is None:
                continue
            factor_file = self.data_dir / file_name
            if not factor_file.exists():
                logger.warning(f"File not found: {factor_file}")
                continue

            logger.info(f"Loading {category.value} factors from {factor_file}")
            parsed = parse_factors_from_text(
                factor_file.read_text(encoding="utf-8"), category
            )
            if parsed:
                setattr(factors, category.value, parsed)

        await save_factors(DatabaseSettingsStore(self.session), factors)
        return {
            FactorCategory.TRANSPORT: len(factors.transport),
            FactorCategory.FOOD: len(factors.food),
        }

    async def seed_users(self) -> int:
        """
        Create the demo users.

        Returns:
            Number of users created
        """
        repo = UserRepository(self.session)
        for user in DEMO_USERS:
            await repo.create(**user)

        logger.info(f"Created {len(DEMO_USERS)} users")
        return len(DEMO_USERS)

    async def seed_activities(self) -> int:
        """
        Create the demo activities with emissions from the default factors.

        Returns:
            Number of activities created
        """
        users = UserRepository(self.session)
        activities = ActivityRepository(self.session)
        factors = get_default_factors()
        count = 0

        for college_id, day, travel_mode, distance_km, food_item, kwh in DEMO_ACTIVITIES:
            user = await users.get_by_college_id(college_id)
            if user is None:
                logger.warning(f"Demo user {college_id} missing, skipping activity")
                continue

            emissions = compute_emissions(travel_mode, distance_km, food_item, kwh, factors)
            await activities.create(
                user_id=user.id,
                date=day,
                travel_mode=travel_mode,
                distance_km=UnitConverter.normalize_number(distance_km),
                food_item=food_item,
                electricity_kwh=UnitConverter.normalize_number(kwh),
                **to_decimal_breakdown(emissions),
            )
            count += 1

        logger.info(f"Created {count} activities")
        return count
