from __future__ import annotations

from sqlalchemy import delete

from app.core.repository import Repository
from app.domain.accounts.models import Account
from app.domain.transactions.models import Transaction


class AccountRepository(Repository[Account]):
    model = Account

    async def accounts_for_user(self, user_id: int) -> list[Account]:
        result = await self.db.execute(
            self._select().where(Account.user_id == user_id).order_by(Account.id)
        )
        return list(result.scalars().all())

    async def _delete_dependents(self, entity_id: int) -> None:
        await self.db.execute(delete(Transaction).where(Transaction.account_id == entity_id))
