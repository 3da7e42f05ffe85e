from decimal import Decimal

import pytest

from app.core.errors import Conflict, InvalidType, NotFound
from app.domain.accounts.models import Account
from app.domain.accounts.services import total_balance
from app.domain.transactions.models import Transaction
from app.domain.transactions.services import get_transactions_by_type, summarize
from app.domain.users.schemas import UserCreate, UserUpdate
from app.domain.users.services import create_user, delete_user, update_user


def test_summarize_income_and_expense():
    transactions = [
        Transaction(amount=Decimal("100.00"), transaction_type="income"),
        Transaction(amount=Decimal("30.00"), transaction_type="expense"),
    ]

    summary = summarize(transactions)

    assert summary.total_income == Decimal("100.00")
    assert summary.total_expense == Decimal("30.00")
    assert summary.balance == Decimal("70.00")
    assert summary.count == 2


def test_summarize_empty_history():
    summary = summarize([])

    assert summary.total_income == Decimal("0.00")
    assert summary.balance == Decimal("0.00")
    assert summary.count == 0


def test_summary_balance_can_be_negative():
    summary = summarize([Transaction(amount=Decimal("12.34"), transaction_type="expense")])
    assert summary.balance == Decimal("-12.34")


def test_total_balance_sums_stored_balances():
    accounts = [Account(balance=Decimal("100.00")), Account(balance=Decimal("50.50"))]
    assert total_balance(accounts) == Decimal("150.50")
    assert total_balance([]) == Decimal("0.00")


async def test_email_update_conflicts_only_with_other_users(db):
    alice = await create_user(db, UserCreate(email="alice@example.com", password="pw-alice"))
    await create_user(db, UserCreate(email="bob@example.com", password="pw-bob"))

    with pytest.raises(Conflict):
        await update_user(db, alice.id, UserUpdate(email="bob@example.com"))

    same = await update_user(db, alice.id, UserUpdate(email="alice@example.com"))
    assert same.email == "alice@example.com"


async def test_duplicate_email_on_create(db):
    await create_user(db, UserCreate(email="alice@example.com", password="pw"))
    with pytest.raises(Conflict):
        await create_user(db, UserCreate(email="alice@example.com", password="other"))


async def test_delete_missing_user_is_not_found_every_time(db):
    for _ in range(2):
        with pytest.raises(NotFound) as excinfo:
            await delete_user(db, 42)
        assert excinfo.value.detail == "User not found"


async def test_type_aggregate_rejects_unknown_type(db):
    with pytest.raises(InvalidType):
        await get_transactions_by_type(db, "transfer")
