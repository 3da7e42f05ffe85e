"""Services for accounts and per-user balance totals."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BadRequest, NotFound
from app.core.money import ZERO, parse_money, total
from app.core.validation import is_blank, require_non_blank
from app.domain.accounts.models import Account
from app.domain.accounts.repository import AccountRepository
from app.domain.accounts.schemas import AccountCreate, AccountUpdate
from app.domain.users.models import User
from app.domain.users.services import get_user

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UserAccounts:
    user: User
    accounts: list[Account]
    total_balance: Decimal


def total_balance(accounts: Iterable[Account]) -> Decimal:
    """Sum of stored balances; transactions are not consulted."""
    return total(account.balance or ZERO for account in accounts)


async def list_accounts(db: AsyncSession) -> list[Account]:
    return await AccountRepository(db).get_all()


async def get_account(db: AsyncSession, account_id: int) -> Account:
    """Return the account or raise 404."""
    account = await AccountRepository(db).get_by_id(account_id)
    if account is None:
        raise NotFound("Account")
    return account


async def create_account(db: AsyncSession, payload: AccountCreate) -> Account:
    if payload.user_id is None or is_blank(payload.name):
        raise BadRequest("userId and name are required")

    user = await get_user(db, payload.user_id)

    balance = ZERO
    if payload.balance is not None:
        balance = parse_money(payload.balance, "Balance")

    account = await AccountRepository(db).create(user=user, name=payload.name, balance=balance)
    logger.info("Created account %s for user %s", account.id, user.id)
    return account


async def update_account(db: AsyncSession, account_id: int, payload: AccountUpdate) -> Account:
    """Apply the supplied fields; absent or null keys leave the account unchanged."""
    account = await get_account(db, account_id)

    update_data = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None
    }
    if not update_data:
        return account

    changes: dict[str, object] = {}

    if "name" in update_data:
        changes["name"] = require_non_blank(update_data["name"], "Name must not be empty")

    if "balance" in update_data:
        changes["balance"] = parse_money(update_data["balance"], "Balance")

    if "user_id" in update_data:
        # Ownership transfer
        changes["user"] = await get_user(db, update_data["user_id"])

    return await AccountRepository(db).save(account, **changes)


async def delete_account(db: AsyncSession, account_id: int) -> None:
    """Delete the account together with its transactions."""
    if not await AccountRepository(db).delete(account_id):
        raise NotFound("Account")
    logger.info("Deleted account %s", account_id)


async def get_user_accounts(db: AsyncSession, user_id: int) -> UserAccounts:
    user = await get_user(db, user_id)
    accounts = await AccountRepository(db).accounts_for_user(user.id)
    return UserAccounts(user=user, accounts=accounts, total_balance=total_balance(accounts))
