"""API routes for managing transactions and their aggregates."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.money import format_money
from app.core.serialization import MessageOut
from app.domain.transactions import services
from app.domain.transactions.schemas import (
    AccountTransactionsOut,
    SummaryOut,
    TransactionCreate,
    TransactionOut,
    TransactionsByTypeOut,
    TransactionUpdate,
)

router = APIRouter()


@router.get("", response_model=list[TransactionOut])
async def list_transactions(db: AsyncSession = Depends(get_db)) -> list[TransactionOut]:
    transactions = await services.list_transactions(db)
    return [TransactionOut.from_model(transaction) for transaction in transactions]


@router.get("/account/{account_id}", response_model=AccountTransactionsOut)
async def get_account_transactions(
    account_id: int,
    db: AsyncSession = Depends(get_db),
) -> AccountTransactionsOut:
    """Return an account's transactions, newest first, with income/expense totals."""
    result = await services.get_account_transactions(db, account_id)
    summary = result.summary
    return AccountTransactionsOut(
        account_id=result.account_id,
        account_name=result.account_name,
        transactions=[TransactionOut.from_model(transaction) for transaction in result.transactions],
        summary=SummaryOut(
            total_income=format_money(summary.total_income),
            total_expense=format_money(summary.total_expense),
            balance=format_money(summary.balance),
            count=summary.count,
        ),
    )


@router.get("/type/{transaction_type}", response_model=TransactionsByTypeOut)
async def get_transactions_by_type(
    transaction_type: str,
    db: AsyncSession = Depends(get_db),
) -> TransactionsByTypeOut:
    """Return all income or all expense transactions with their total."""
    result = await services.get_transactions_by_type(db, transaction_type)
    return TransactionsByTypeOut(
        type=result.transaction_type,
        transactions=[TransactionOut.from_model(transaction) for transaction in result.transactions],
        total=format_money(result.total),
        count=result.count,
    )


@router.get("/{transaction_id}", response_model=TransactionOut)
async def get_transaction(transaction_id: int, db: AsyncSession = Depends(get_db)) -> TransactionOut:
    transaction = await services.get_transaction(db, transaction_id)
    return TransactionOut.from_model(transaction)


@router.post("", response_model=TransactionOut, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: Optional[TransactionCreate] = None,
    db: AsyncSession = Depends(get_db),
) -> TransactionOut:
    """Record a transaction.

    Body: {"accountId": 1, "amount": "100.50", "type": "income",
    "category": "Salary", "description": "Monthly salary", "date": "2026-02-06"}
    """
    transaction = await services.create_transaction(db, payload or TransactionCreate())
    return TransactionOut.from_model(transaction)


@router.put("/{transaction_id}", response_model=TransactionOut)
async def update_transaction(
    transaction_id: int,
    payload: Optional[TransactionUpdate] = None,
    db: AsyncSession = Depends(get_db),
) -> TransactionOut:
    transaction = await services.update_transaction(db, transaction_id, payload or TransactionUpdate())
    return TransactionOut.from_model(transaction)


@router.delete("/{transaction_id}", response_model=MessageOut)
async def delete_transaction(transaction_id: int, db: AsyncSession = Depends(get_db)) -> MessageOut:
    await services.delete_transaction(db, transaction_id)
    return MessageOut(message="Transaction deleted successfully")
