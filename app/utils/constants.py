"""
Application constants following kkb_fastapi pattern.
"""
from enum import Enum


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class FactorCategory(str, Enum):
    """Factor table categories that have a text import/export format."""
    TRANSPORT = "transport"
    FOOD = "food"

    @property
    def header(self) -> str:
        """Header row of the two-column text format."""
        if self is FactorCategory.TRANSPORT:
            return "mode,kg_per_km"
        return "item,kg_per_meal"


class UserRole(str, Enum):
    """Campus user roles."""
    STUDENT = "student"
    STAFF = "staff"


class TransactionType(str, Enum):
    """Reward transaction types."""
    EARN = "earn"
    REDEEM = "redeem"


class FactorStoreBackend(str, Enum):
    """Storage backends for the emission factor table."""
    DATABASE = "database"
    FILE = "file"


# Key of the persisted emission factor table
FACTOR_TABLE_KEY = "emission_factors"

# kg CO2 per day separating the reward bonus from the reward decay
DEFAULT_DAILY_THRESHOLD_KG = 5.0

# Cafeteria redemption catalog: (cafeteria, item, points cost)
CAFETERIA_ITEMS = [
    ("BLU", "Coffee Snack", 50),
    ("NEW", "Sandwich Juice", 75),
    ("RISE", "Meal Voucher", 120),
    ("CUP_OF_JOE", "Dessert Voucher", 60),
]
