"""
Emission factor table management.

Built-in defaults plus loading and saving the user-editable table through a
``SettingsStore``. Loading never fails: a missing or malformed table falls
back to the defaults.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from app.pydantic_models.emission_factor import EmissionFactorTable
from app.services.factors.stores import SettingsStore
from app.utils.constants import FACTOR_TABLE_KEY

logger = logging.getLogger(__name__)

DEFAULT_EMISSION_FACTORS = {
    # kg CO2 per km
    "transport": {
        "Walk": 0.0,
        "Cycle": 0.0,
        "Bus": 0.06,
        "Motorcycle": 0.09,
        "Car": 0.21,
        "Train": 0.045,
    },
    # kg CO2 per meal
    "food": {
        "Vegan": 1.1,
        "Veg": 1.7,
        "Non-Veg": 2.5,
        "Red-Meat": 6.5,
        "Fast-Food": 3.0,
    },
    # kg CO2 per kWh
    "electricity": 0.7,
}


class FactorTableParseError(Exception):
    """
    Raised when a persisted factor table cannot be used.

    Keeps the raw value and the underlying error for diagnostics.
    """

    def __init__(self, message: str, raw: str | bytes | None = None,
                 original_exception: Exception | None = None):
        self.raw = raw
        self.original_exception = original_exception
        error_msg = message
        if original_exception:
            error_msg += (
                f"\nCaused by: {type(original_exception).__name__}: "
                f"{original_exception}"
            )
        super().__init__(error_msg)


def get_default_factors() -> EmissionFactorTable:
    """Return a fresh copy of the built-in factor table."""
    return EmissionFactorTable.model_validate(DEFAULT_EMISSION_FACTORS)


def parse_factor_table(raw: str | bytes) -> EmissionFactorTable:
    """
    Parse a JSON-serialized factor table.

    Raises:
        FactorTableParseError: If the JSON is malformed or the table invalid
    """
    try:
        return EmissionFactorTable.model_validate_json(raw)
    except ValidationError as e:
        raise FactorTableParseError("Malformed emission factor table", raw, e) from e


async def read_factors(store: SettingsStore) -> Optional[EmissionFactorTable]:
    """
    Read the persisted factor table.

    Returns:
        The stored table, or None when nothing has been saved

    Raises:
        FactorTableParseError: If the stored value is malformed
    """
    raw = await store.get(FACTOR_TABLE_KEY)
    if raw is None:
        return None
    return parse_factor_table(raw)


async def load_factors(store: SettingsStore) -> EmissionFactorTable:
    """
    Load the factor table currently in effect.

    Falls back to the defaults when nothing is stored or the stored table is malformed.
    """
    try:
        factors = await read_factors(store)
    except FactorTableParseError as e:
        logger.warning(f"Using default emission factors: {e}")
        return get_default_factors()

    if factors is None:
        logger.debug("No saved emission factors, using defaults")
        return get_default_factors()

    return factors


async def save_factors(store: SettingsStore, factors: EmissionFactorTable) -> None:
    """Persist the factor table under its fixed key."""
    await store.set(FACTOR_TABLE_KEY, factors.model_dump_json())
    logger.info(
        f"Saved emission factors ({len(factors.transport)} transport, "
        f"{len(factors.food)} food)"
    )
