from __future__ import annotations

from app.core.repository import Repository
from app.domain.transactions.models import Transaction

# Newest first; id breaks ties between same-day transactions.
NEWEST_FIRST = (Transaction.transaction_date.desc(), Transaction.id.desc())


class TransactionRepository(Repository[Transaction]):
    model = Transaction

    async def transactions_for_account(self, account_id: int) -> list[Transaction]:
        result = await self.db.execute(
            self._select()
            .where(Transaction.account_id == account_id)
            .order_by(*NEWEST_FIRST)
        )
        return list(result.scalars().all())

    async def transactions_by_type(self, transaction_type: str) -> list[Transaction]:
        result = await self.db.execute(
            self._select()
            .where(Transaction.transaction_type == transaction_type)
            .order_by(*NEWEST_FIRST)
        )
        return list(result.scalars().all())
