"""API routes for managing accounts."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.money import format_money
from app.core.serialization import MessageOut
from app.domain.accounts import services
from app.domain.accounts.schemas import (
    AccountCreate,
    AccountOut,
    AccountUpdate,
    UserAccountItem,
    UserAccountsOut,
)

router = APIRouter()


@router.get("", response_model=list[AccountOut])
async def list_accounts(db: AsyncSession = Depends(get_db)) -> list[AccountOut]:
    """Return all accounts with their owner."""
    accounts = await services.list_accounts(db)
    return [AccountOut.from_model(account) for account in accounts]


@router.get("/user/{user_id}", response_model=UserAccountsOut)
async def get_user_accounts(user_id: int, db: AsyncSession = Depends(get_db)) -> UserAccountsOut:
    """Return a user's accounts and the sum of their stored balances."""
    overview = await services.get_user_accounts(db, user_id)
    return UserAccountsOut(
        user_id=overview.user.id,
        user_email=overview.user.email,
        accounts=[UserAccountItem.from_model(account) for account in overview.accounts],
        total_balance=format_money(overview.total_balance),
    )


@router.get("/{account_id}", response_model=AccountOut)
async def get_account(account_id: int, db: AsyncSession = Depends(get_db)) -> AccountOut:
    account = await services.get_account(db, account_id)
    return AccountOut.from_model(account)


@router.post("", response_model=AccountOut, status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: Optional[AccountCreate] = None,
    db: AsyncSession = Depends(get_db),
) -> AccountOut:
    """Create an account. Body: {"userId": 1, "name": "Checking", "balance": "1000.00"}."""
    account = await services.create_account(db, payload or AccountCreate())
    return AccountOut.from_model(account)


@router.put("/{account_id}", response_model=AccountOut)
async def update_account(
    account_id: int,
    payload: Optional[AccountUpdate] = None,
    db: AsyncSession = Depends(get_db),
) -> AccountOut:
    """Rename, set the balance or transfer ownership of an account."""
    account = await services.update_account(db, account_id, payload or AccountUpdate())
    return AccountOut.from_model(account)


@router.delete("/{account_id}", response_model=MessageOut)
async def delete_account(account_id: int, db: AsyncSession = Depends(get_db)) -> MessageOut:
    await services.delete_account(db, account_id)
    return MessageOut(message="Account deleted successfully")
