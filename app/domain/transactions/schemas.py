"""Pydantic schemas for transaction operations."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import ConfigDict

from app.core.money import format_money
from app.core.serialization import CamelModel, format_date, format_timestamp
from app.domain.transactions.models import Transaction


class TransactionBase(CamelModel):
    """Shared attributes for transaction payloads.

    ``amount``, ``type`` and ``date`` stay loosely typed so the service can
    answer with the specific validation message.
    """

    account_id: Optional[int] = None
    amount: Any = None
    type: Any = None
    category: Optional[str] = None
    description: Optional[str] = None
    date: Any = None

    model_config = ConfigDict(extra="ignore")


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(TransactionBase):
    pass


class TransactionOut(CamelModel):
    id: int
    account_id: int
    account_name: Optional[str]
    user_id: Optional[int]
    user_email: Optional[str]
    amount: str
    type: str
    category: Optional[str]
    description: Optional[str]
    date: Optional[str]
    created_at: Optional[str]

    @classmethod
    def from_model(cls, transaction: Transaction) -> "TransactionOut":
        account = transaction.account
        user = account.user if account else None
        return cls(
            id=transaction.id,
            account_id=transaction.account_id,
            account_name=account.name if account else None,
            user_id=user.id if user else None,
            user_email=user.email if user else None,
            amount=format_money(transaction.amount),
            type=transaction.transaction_type,
            category=transaction.category,
            description=transaction.description,
            date=format_date(transaction.transaction_date),
            created_at=format_timestamp(transaction.created_at),
        )


class SummaryOut(CamelModel):
    total_income: str
    total_expense: str
    balance: str
    count: int


class AccountTransactionsOut(CamelModel):
    account_id: int
    account_name: str
    transactions: list[TransactionOut]
    summary: SummaryOut


class TransactionsByTypeOut(CamelModel):
    type: str
    transactions: list[TransactionOut]
    total: str
    count: int
