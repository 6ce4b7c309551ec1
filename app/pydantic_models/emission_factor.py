"""
Pydantic models for the emission factor table following kkb_fastapi pattern.
"""
import math

from pydantic import BaseModel, Field, field_validator


def _check_factor(value: float) -> float:
    if not math.isfinite(value) or value < 0:
        raise ValueError("emission factors must be finite and non-negative")
    return value


class EmissionFactorTable(BaseModel):
    """
    Emission factors currently in effect.

    Unknown travel modes and food items resolve to a factor of 0.
    """

    transport: dict[str, float] = Field(
        default_factory=dict,
        description="kg CO2 per km by travel mode",
        examples=[{"Bus": 0.06, "Car": 0.21}],
    )
    food: dict[str, float] = Field(
        default_factory=dict,
        description="kg CO2 per meal by meal type",
        examples=[{"Veg": 1.7, "Non-Veg": 2.5}],
    )
    electricity: float = Field(
        ...,
        description="kg CO2 per kWh",
        examples=[0.7],
    )

    @field_validator("transport", "food")
    @classmethod
    def validate_factor_mapping(cls, value: dict[str, float]) -> dict[str, float]:
        for factor in value.values():
            _check_factor(factor)
        return value

    @field_validator("electricity")
    @classmethod
    def validate_electricity(cls, value: float) -> float:
        return _check_factor(value)

    def transport_factor(self, travel_mode: str) -> float:
        """Factor for a travel mode, 0 when not configured."""
        return self.transport.get(travel_mode, 0.0)

    def food_factor(self, food_item: str) -> float:
        """Factor for a meal type, 0 when not configured."""
        return self.food.get(food_item, 0.0)
