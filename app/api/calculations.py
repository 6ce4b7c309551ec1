"""
Emissions Calculations API router.

Live preview of an activity's emissions and reward points.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.core.dependencies import get_app_config, get_db_session, get_settings_store
from app.pydantic_models.calculation import ActivityInput, EmissionPreviewResponse
from app.services.activity_logger import ActivityLoggingService
from app.services.factors.stores import SettingsStore

router = APIRouter(
    prefix="/api/v1/calculations",
    tags=["Calculations"],
)

logger = logging.getLogger(__name__)


@router.post("/preview", response_model=EmissionPreviewResponse)
async def preview_emissions(
    activity: ActivityInput,
    session: AsyncSession = Depends(get_db_session),
    store: SettingsStore = Depends(get_settings_store),
    config: Config = Depends(get_app_config),
):
    """
    Calculate emissions and potential points without logging anything.

    Invalid distances or electricity usage count as 0 and unknown travel
    modes or food items contribute nothing.

    Example:
        ```
        POST /api/v1/calculations/preview
        {
            "travel_mode": "Car",
            "distance_km": 20,
            "food_item": "Non-Veg",
            "electricity_kwh": 3.0
        }
        ```
    """
    service = ActivityLoggingService(session, store, threshold=config.daily_threshold_kg)
    emissions, potential_points = await service.preview(activity)

    return EmissionPreviewResponse(
        emissions=emissions,
        potential_points=potential_points,
        threshold_kg=service.threshold,
    )
