"""Seed a demo user with accounts and transactions."""

import argparse
import asyncio
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path
import sys
from typing import List

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from app.core.database import AsyncSessionLocal, init_db  # noqa: E402
from app.core.security import hash_password  # noqa: E402
from app.domain.accounts.models import Account  # noqa: E402
from app.domain.transactions.models import Transaction  # noqa: E402
from app.domain.users.repository import UserRepository  # noqa: E402
from app.domain.users.models import User  # noqa: E402

DEMO_ACCOUNTS: List[dict] = [
    {"name": "Checking", "balance": Decimal("1000.00")},
    {"name": "Savings", "balance": Decimal("2500.50")},
]

DEMO_TRANSACTIONS: List[dict] = [
    {"amount": Decimal("3200.00"), "transaction_type": "income", "category": "Salary", "days_ago": 20},
    {"amount": Decimal("950.00"), "transaction_type": "expense", "category": "Rent", "days_ago": 18},
    {"amount": Decimal("84.37"), "transaction_type": "expense", "category": "Groceries", "days_ago": 6},
    {"amount": Decimal("45.00"), "transaction_type": "expense", "category": "Utilities", "days_ago": 2},
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed a demo user with accounts and transactions")
    parser.add_argument("--email", default="demo@example.com", help="Demo user email")
    parser.add_argument("--password", default="demo-password", help="Demo user password")
    return parser.parse_args()


async def seed_demo(email: str, password: str) -> None:
    await init_db()

    async with AsyncSessionLocal() as session:
        if await UserRepository(session).get_by_email(email):
            print(f"User {email} already exists, nothing to do")
            return

        user = User(email=email, password_hash=hash_password(password))
        session.add(user)

        accounts = [Account(user=user, **account) for account in DEMO_ACCOUNTS]
        session.add_all(accounts)

        today = date.today()
        for item in DEMO_TRANSACTIONS:
            fields = dict(item)
            days_ago = fields.pop("days_ago")
            session.add(
                Transaction(
                    account=accounts[0],
                    transaction_date=today - timedelta(days=days_ago),
                    **fields,
                )
            )

        await session.commit()
        print(f"Seeded {email} with {len(accounts)} accounts and {len(DEMO_TRANSACTIONS)} transactions")


if __name__ == "__main__":
    args = parse_args()
    asyncio.run(seed_demo(args.email, args.password))
