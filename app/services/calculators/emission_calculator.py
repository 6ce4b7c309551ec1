"""
Emission calculator for one logged activity.

Pure functions: the factor table is always passed in by the caller.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal

from app.pydantic_models.calculation import ActivityInput, EmissionResult
from app.pydantic_models.emission_factor import EmissionFactorTable
from app.services.calculators.unit_converter import UnitConverter

logger = logging.getLogger(__name__)


def _as_factor_table(factors: EmissionFactorTable | Mapping) -> EmissionFactorTable:
    if isinstance(factors, EmissionFactorTable):
        return factors
    return EmissionFactorTable.model_validate(factors)


def compute_emissions(
    travel_mode: str,
    distance_km,
    food_item: str,
    electricity_kwh,
    factors: EmissionFactorTable | Mapping,
) -> EmissionResult:
    """
    Calculate the emission breakdown of one activity.

    Args:
        travel_mode: Transport factor key (e.g., "Car")
        distance_km: Distance travelled; anything but a non-negative number counts as 0
        food_item: Food factor key (e.g., "Veg")
        electricity_kwh: Electricity used; anything but a non-negative number counts as 0
        factors: Emission factor table in effect

    Returns:
        EmissionResult with every value rounded to 3 decimals

    Formula:
        travel = distance_km * transport[travel_mode]
        food = food[food_item]
        electricity = electricity_kwh * electricity
        total = travel + food + electricity

    Example:
        >>> result = compute_emissions("Car", 20, "Non-Veg", 3.0, get_default_factors())
        >>> result.total_emissions
        8.8
    """
    table = _as_factor_table(factors)

    distance = UnitConverter.to_non_negative_decimal(distance_km)
    kwh = UnitConverter.to_non_negative_decimal(electricity_kwh)

    if travel_mode not in table.transport:
        logger.debug(f"No transport factor for {travel_mode!r}, counting 0")
    if food_item not in table.food:
        logger.debug(f"No food factor for {food_item!r}, counting 0")

    travel = UnitConverter.round_kg(
        distance * UnitConverter.normalize_number(table.transport_factor(travel_mode))
    )
    food = UnitConverter.round_kg(
        UnitConverter.normalize_number(table.food_factor(food_item))
    )
    electricity = UnitConverter.round_kg(
        kwh * UnitConverter.normalize_number(table.electricity)
    )
    total = travel + food + electricity

    return EmissionResult(
        travel_emissions=float(travel),
        food_emissions=float(food),
        electricity_emissions=float(electricity),
        total_emissions=float(total),
    )


def compute_activity_emissions(
    activity: ActivityInput, factors: EmissionFactorTable | Mapping
) -> EmissionResult:
    """Calculate emissions for an ``ActivityInput``."""
    return compute_emissions(
        activity.travel_mode,
        activity.distance_km,
        activity.food_item,
        activity.electricity_kwh,
        factors,
    )


def to_decimal_breakdown(result: EmissionResult) -> dict[str, Decimal]:
    """Emission values as 3-decimal Decimals, keyed by column name."""
    return {
        field: UnitConverter.round_kg(UnitConverter.normalize_number(value))
        for field, value in result.model_dump().items()
    }
