"""API routes for managing users."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.serialization import MessageOut
from app.domain.users import services
from app.domain.users.schemas import UserCreate, UserOut, UserUpdate

router = APIRouter()


@router.get("", response_model=list[UserOut])
async def list_users(db: AsyncSession = Depends(get_db)) -> list[UserOut]:
    """Return all users."""
    users = await services.list_users(db)
    return [UserOut.from_model(user) for user in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)) -> UserOut:
    user = await services.get_user(db, user_id)
    return UserOut.from_model(user)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Optional[UserCreate] = None,
    db: AsyncSession = Depends(get_db),
) -> UserOut:
    """Create a user. Body: {"email": "...", "password": "..."}."""
    user = await services.create_user(db, payload or UserCreate())
    return UserOut.from_model(user)


@router.put("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: int,
    payload: Optional[UserUpdate] = None,
    db: AsyncSession = Depends(get_db),
) -> UserOut:
    user = await services.update_user(db, user_id, payload or UserUpdate())
    return UserOut.from_model(user)


@router.delete("/{user_id}", response_model=MessageOut)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)) -> MessageOut:
    """Delete a user along with its accounts and their transactions."""
    await services.delete_user(db, user_id)
    return MessageOut(message="User deleted successfully")
