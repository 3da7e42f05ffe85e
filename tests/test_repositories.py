from datetime import date
from decimal import Decimal

from app.domain.accounts.repository import AccountRepository
from app.domain.transactions.repository import TransactionRepository
from app.domain.users.repository import UserRepository


async def _seed(db):
    users = UserRepository(db)
    accounts = AccountRepository(db)
    transactions = TransactionRepository(db)

    user = await users.create(email="Alice@example.com", password_hash="x")
    account = await accounts.create(user=user, name="Checking", balance=Decimal("10"))
    await transactions.create(
        account=account,
        amount=Decimal("5.00"),
        transaction_type="expense",
        transaction_date=date(2026, 1, 5),
    )
    await transactions.create(
        account=account,
        amount=Decimal("7.00"),
        transaction_type="income",
        transaction_date=date(2026, 3, 1),
    )
    return user, account


async def test_create_assigns_id_and_timestamp(db):
    user = await UserRepository(db).create(email="bob@example.com", password_hash="x")

    assert user.id is not None
    assert user.created_at is not None


async def test_account_balance_defaults_and_is_normalized(db):
    user = await UserRepository(db).create(email="bob@example.com", password_hash="x")
    repo = AccountRepository(db)

    default = await repo.create(user=user, name="Wallet")
    explicit = await repo.create(user=user, name="Savings", balance=Decimal("50.5"))

    assert default.balance == Decimal("0.00")
    assert str(explicit.balance) == "50.50"


async def test_get_by_email_is_case_sensitive(db):
    await _seed(db)
    users = UserRepository(db)

    assert await users.get_by_email("Alice@example.com") is not None
    assert await users.get_by_email("alice@example.com") is None


async def test_update_changes_only_supplied_fields(db):
    _, account = await _seed(db)
    repo = AccountRepository(db)

    updated = await repo.update(account.id, name="Renamed")

    assert updated.name == "Renamed"
    assert updated.balance == Decimal("10.00")
    assert await repo.update(9999, name="Nope") is None


async def test_relationship_queries(db):
    user, account = await _seed(db)

    accounts = await AccountRepository(db).accounts_for_user(user.id)
    assert [item.id for item in accounts] == [account.id]

    transactions = await TransactionRepository(db).transactions_for_account(account.id)
    assert [item.transaction_date for item in transactions] == [date(2026, 3, 1), date(2026, 1, 5)]

    expenses = await TransactionRepository(db).transactions_by_type("expense")
    assert [item.amount for item in expenses] == [Decimal("5.00")]


async def test_delete_user_cascades_to_accounts_and_transactions(db):
    user, account = await _seed(db)

    assert await UserRepository(db).delete(user.id) is True

    assert await AccountRepository(db).get_by_id(account.id) is None
    assert await TransactionRepository(db).get_all() == []
    assert await UserRepository(db).delete(user.id) is False


async def test_delete_account_cascades_to_transactions(db):
    user, account = await _seed(db)

    assert await AccountRepository(db).delete(account.id) is True

    assert await TransactionRepository(db).get_all() == []
    assert await UserRepository(db).get_by_id(user.id) is not None
