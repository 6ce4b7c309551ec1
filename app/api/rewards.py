"""
Rewards API router.

Cafeteria catalog, redemptions and the points ledger.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db_session
from app.database.repositories import RewardTransactionRepository
from app.pydantic_models.reward import (
    CafeteriaItem,
    RedemptionRequest,
    RewardTransactionPydModel,
)
from app.services.exceptions import (
    InsufficientPointsError,
    UnknownCafeteriaItemError,
    UserNotFoundError,
)
from app.services.rewards import RewardRedemptionService, get_cafeteria_items

router = APIRouter(
    prefix="/api/v1/rewards",
    tags=["Rewards"],
)

logger = logging.getLogger(__name__)


@router.get("/cafeteria", response_model=list[CafeteriaItem])
async def list_cafeteria_items():
    """List redeemable cafeteria vouchers."""
    return get_cafeteria_items()


@router.post(
    "/redeem",
    response_model=RewardTransactionPydModel,
    status_code=status.HTTP_201_CREATED,
)
async def redeem_points(
    request: RedemptionRequest,
    session: AsyncSession = Depends(get_db_session),
):
    """Redeem reward points for a cafeteria voucher."""
    service = RewardRedemptionService(session)

    try:
        transaction = await service.redeem(request.user_id, request.cafeteria)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (UnknownCafeteriaItemError, InsufficientPointsError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    await session.commit()
    return transaction


@router.get("/transactions", response_model=list[RewardTransactionPydModel])
async def list_transactions(
    user_id: UUID,
    skip: int = 0,
    limit: int = 100,
    session: AsyncSession = Depends(get_db_session),
):
    """List a user's reward transactions, newest first."""
    repo = RewardTransactionRepository(session)
    return await repo.get_by_user(user_id, skip=skip, limit=limit)
