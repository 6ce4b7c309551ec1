"""
Reward points calculator.

Converts one day's total emissions into reward points.
"""

from decimal import Decimal

from app.services.calculators.unit_converter import UnitConverter
from app.utils.constants import DEFAULT_DAILY_THRESHOLD_KG

BASE_POINTS = 100
BONUS_PER_KG = Decimal("20")
OVER_THRESHOLD_POINTS = 10


def compute_points(
    daily_emissions: float | Decimal,
    threshold: float | Decimal = DEFAULT_DAILY_THRESHOLD_KG,
) -> int:
    """
    Calculate reward points for a day's emissions.

    Args:
        daily_emissions: Total emissions for the day (kg CO2)
        threshold: Daily emissions target (kg CO2)

    Returns:
        Non-negative integer points

    Formula:
        at or under threshold: 100 + round((threshold - daily) * 20)
        over threshold: max(0, 10 - round(daily - threshold))

    Example:
        >>> compute_points(0.0)
        200
        >>> compute_points(7.0)
        8
    """
    daily = UnitConverter.to_non_negative_decimal(daily_emissions)
    limit = UnitConverter.to_non_negative_decimal(threshold)

    if daily <= limit:
        bonus = UnitConverter.round_half_away_from_zero((limit - daily) * BONUS_PER_KG)
        return BASE_POINTS + bonus

    penalty = UnitConverter.round_half_away_from_zero(daily - limit)
    return max(0, OVER_THRESHOLD_POINTS - penalty)
