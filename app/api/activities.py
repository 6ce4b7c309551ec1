"""
Activity API router.

Log daily activities and list them.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.core.dependencies import get_app_config, get_db_session, get_settings_store
from app.database.repositories import ActivityRepository
from app.pydantic_models.activity import (
    ActivityLogRequest,
    ActivityLogResponse,
    ActivityPydModel,
)
from app.pydantic_models.reward import RewardTransactionPydModel
from app.services.activity_logger import ActivityLoggingService
from app.services.exceptions import UserNotFoundError
from app.services.factors.stores import SettingsStore

router = APIRouter(
    prefix="/api/v1/activities",
    tags=["Activity Data"],
)

logger = logging.getLogger(__name__)


@router.post("/", response_model=ActivityLogResponse, status_code=status.HTTP_201_CREATED)
async def log_activity(
    request: ActivityLogRequest,
    session: AsyncSession = Depends(get_db_session),
    store: SettingsStore = Depends(get_settings_store),
    config: Config = Depends(get_app_config),
):
    """
    Log a day's activity.

    Computes emissions with the factor table in effect, stores the activity,
    awards reward points and updates the user's totals.

    Example:
        ```
        POST /api/v1/activities/
        {
            "user_id": "uuid",
            "date": "2024-12-17",
            "travel_mode": "Bus",
            "distance_km": 15,
            "food_item": "Veg",
            "electricity_kwh": 2.5
        }
        ```
    """
    service = ActivityLoggingService(session, store, threshold=config.daily_threshold_kg)

    try:
        logged = await service.log_activity(request.user_id, request)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    await session.commit()

    return ActivityLogResponse(
        activity=ActivityPydModel.model_validate(logged.activity),
        emissions=logged.emissions,
        points_earned=logged.points_earned,
        transaction=(
            RewardTransactionPydModel.model_validate(logged.transaction)
            if logged.transaction
            else None
        ),
    )


@router.get("/", response_model=list[ActivityPydModel])
async def list_activities(
    user_id: UUID,
    skip: int = 0,
    limit: int = 100,
    session: AsyncSession = Depends(get_db_session),
):
    """List a user's activities, most recent first."""
    repo = ActivityRepository(session)
    return await repo.get_by_user(user_id, skip=skip, limit=limit)


@router.get("/{activity_id}", response_model=ActivityPydModel)
async def get_activity(
    activity_id: UUID,
    session: AsyncSession = Depends(get_db_session),
):
    """Get activity by ID."""
    repo = ActivityRepository(session)
    activity = await repo.get_by_id(activity_id)

    if not activity:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Activity {activity_id} not found",
        )

    return activity
