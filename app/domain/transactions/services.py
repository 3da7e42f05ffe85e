"""Services for transactions and their income/expense aggregates."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BadRequest, InvalidAmount, NotFound
from app.core.money import ZERO, add, parse_money, subtract, total
from app.core.validation import parse_date, parse_transaction_type
from app.domain.accounts.services import get_account
from app.domain.transactions.models import Transaction
from app.domain.transactions.repository import TransactionRepository
from app.domain.transactions.schemas import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionSummary:
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    count: int


@dataclass(slots=True)
class AccountTransactions:
    account_id: int
    account_name: str
    transactions: list[Transaction]
    summary: TransactionSummary


@dataclass(slots=True)
class TransactionsByType:
    transaction_type: str
    transactions: list[Transaction]
    total: Decimal
    count: int


def summarize(transactions: Iterable[Transaction]) -> TransactionSummary:
    """Income and expense totals for a set of transactions.

    The resulting ``balance`` is income minus expense. It is computed here
    and is unrelated to the account's stored balance.
    """
    total_income = ZERO
    total_expense = ZERO
    count = 0

    for transaction in transactions:
        if transaction.transaction_type == "income":
            total_income = add(total_income, transaction.amount)
        else:
            total_expense = add(total_expense, transaction.amount)
        count += 1

    return TransactionSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=subtract(total_income, total_expense),
        count=count,
    )


def _parse_amount(value: object) -> Decimal:
    amount = parse_money(value, "Amount")
    if amount < ZERO:
        raise InvalidAmount("Amount must not be negative")
    return amount


async def list_transactions(db: AsyncSession) -> list[Transaction]:
    return await TransactionRepository(db).get_all()


async def get_transaction(db: AsyncSession, transaction_id: int) -> Transaction:
    """Return the transaction or raise 404."""
    transaction = await TransactionRepository(db).get_by_id(transaction_id)
    if transaction is None:
        raise NotFound("Transaction")
    return transaction


async def create_transaction(db: AsyncSession, payload: TransactionCreate) -> Transaction:
    if payload.account_id is None or payload.amount is None or payload.type is None:
        raise BadRequest("accountId, amount, and type are required")

    account = await get_account(db, payload.account_id)
    transaction_type = parse_transaction_type(payload.type)
    amount = _parse_amount(payload.amount)

    fields: dict[str, object] = {
        "account": account,
        "amount": amount,
        "transaction_type": transaction_type,
        "category": payload.category,
        "description": payload.description,
    }
    if payload.date is not None:
        fields["transaction_date"] = parse_date(payload.date)

    transaction = await TransactionRepository(db).create(**fields)
    logger.info(
        "Created %s transaction %s on account %s",
        transaction.transaction_type,
        transaction.id,
        account.id,
    )
    return transaction


async def update_transaction(
    db: AsyncSession,
    transaction_id: int,
    payload: TransactionUpdate,
) -> Transaction:
    """Apply the supplied fields; absent or null keys leave the transaction unchanged."""
    transaction = await get_transaction(db, transaction_id)

    update_data = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None
    }
    if not update_data:
        return transaction

    changes: dict[str, object] = {}

    if "amount" in update_data:
        changes["amount"] = _parse_amount(update_data["amount"])
    if "type" in update_data:
        changes["transaction_type"] = parse_transaction_type(update_data["type"])
    if "category" in update_data:
        changes["category"] = update_data["category"]
    if "description" in update_data:
        changes["description"] = update_data["description"]
    if "date" in update_data:
        changes["transaction_date"] = parse_date(update_data["date"])
    if "account_id" in update_data:
        changes["account"] = await get_account(db, update_data["account_id"])

    return await TransactionRepository(db).save(transaction, **changes)


async def delete_transaction(db: AsyncSession, transaction_id: int) -> None:
    if not await TransactionRepository(db).delete(transaction_id):
        raise NotFound("Transaction")
    logger.info("Deleted transaction %s", transaction_id)


async def get_account_transactions(db: AsyncSession, account_id: int) -> AccountTransactions:
    account = await get_account(db, account_id)
    transactions = await TransactionRepository(db).transactions_for_account(account.id)
    return AccountTransactions(
        account_id=account.id,
        account_name=account.name,
        transactions=transactions,
        summary=summarize(transactions),
    )


async def get_transactions_by_type(db: AsyncSession, transaction_type: str) -> TransactionsByType:
    transaction_type = parse_transaction_type(transaction_type)
    transactions = await TransactionRepository(db).transactions_by_type(transaction_type)
    return TransactionsByType(
        transaction_type=transaction_type,
        transactions=transactions,
        total=total(transaction.amount for transaction in transactions),
        count=len(transactions),
    )
