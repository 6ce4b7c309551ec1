"""
Pydantic models for emission calculations following kkb_fastapi pattern.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActivityInput(BaseModel):
    """Raw activity fields for one day."""

    travel_mode: str = Field(
        ...,
        description="Travel mode; must match a transport factor to count",
        examples=["Car"],
    )
    distance_km: Any = Field(
        None,
        description="Distance travelled in km; invalid values count as 0",
        examples=[20],
    )
    food_item: str = Field(
        ...,
        description="Meal type; must match a food factor to count",
        examples=["Non-Veg"],
    )
    electricity_kwh: Any = Field(
        0,
        description="Electricity used in kWh; invalid values count as 0",
        examples=[3.0],
    )


class EmissionResult(BaseModel):
    """Emission breakdown for one activity, in kg CO2 rounded to 3 decimals."""

    model_config = ConfigDict(frozen=True)

    travel_emissions: float = Field(..., examples=[4.2])
    food_emissions: float = Field(..., examples=[2.5])
    electricity_emissions: float = Field(..., examples=[2.1])
    total_emissions: float = Field(..., examples=[8.8])


class EmissionPreviewResponse(BaseModel):
    """Live preview of an activity before it is logged."""

    emissions: EmissionResult
    potential_points: int = Field(
        ...,
        ge=0,
        description="Points the activity would earn if logged",
        examples=[8],
    )
    threshold_kg: float = Field(
        ...,
        description="Daily threshold used for the points estimate",
        examples=[5.0],
    )
