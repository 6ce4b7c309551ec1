"""
Users API router.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db_session
from app.database.repositories import UserRepository
from app.pydantic_models.user import UserCreate, UserPydModel

router = APIRouter(
    prefix="/api/v1/users",
    tags=["Users"],
)

logger = logging.getLogger(__name__)


@router.post("/", response_model=UserPydModel, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    session: AsyncSession = Depends(get_db_session),
):
    """Register a campus user with zero points and emissions."""
    repo = UserRepository(session)

    if await repo.get_by_college_id(user.college_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"College ID {user.college_id} already registered",
        )

    created = await repo.create(**user.model_dump(mode="json"))
    logger.info(f"Created user {created.id} ({created.college_id})")
    return created


@router.get("/", response_model=list[UserPydModel])
async def list_users(
    skip: int = 0,
    limit: int = 100,
    session: AsyncSession = Depends(get_db_session),
):
    """List users."""
    repo = UserRepository(session)
    return await repo.get_all(skip=skip, limit=limit)


@router.get("/{user_id}", response_model=UserPydModel)
async def get_user(
    user_id: UUID,
    session: AsyncSession = Depends(get_db_session),
):
    """Get user by ID."""
    repo = UserRepository(session)
    user = await repo.get_by_id(user_id)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_id} not found",
        )

    return user
