"""Pydantic schemas for account operations."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import ConfigDict

from app.core.money import format_money
from app.core.serialization import CamelModel, format_timestamp
from app.domain.accounts.models import Account


class AccountBase(CamelModel):
    """Shared attributes for account payloads."""

    user_id: Optional[int] = None
    name: Optional[str] = None
    # Numbers or numeric strings; parsed by the service.
    balance: Any = None

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class AccountCreate(AccountBase):
    """Schema for creating an account."""

    pass


class AccountUpdate(AccountBase):
    """Schema for updating an account."""

    pass


class AccountOut(CamelModel):
    id: int
    user_id: int
    user_email: Optional[str]
    name: str
    balance: str
    created_at: Optional[str]

    @classmethod
    def from_model(cls, account: Account) -> "AccountOut":
        return cls(
            id=account.id,
            user_id=account.user_id,
            user_email=account.user.email if account.user else None,
            name=account.name,
            balance=format_money(account.balance),
            created_at=format_timestamp(account.created_at),
        )


class UserAccountItem(CamelModel):
    id: int
    name: str
    balance: str
    created_at: Optional[str]

    @classmethod
    def from_model(cls, account: Account) -> "UserAccountItem":
        return cls(
            id=account.id,
            name=account.name,
            balance=format_money(account.balance),
            created_at=format_timestamp(account.created_at),
        )


class UserAccountsOut(CamelModel):
    """Accounts of one user with the sum of their stored balances."""

    user_id: int
    user_email: str
    accounts: list[UserAccountItem]
    total_balance: str
