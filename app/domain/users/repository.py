from __future__ import annotations

from sqlalchemy import delete, select

from app.core.repository import Repository
from app.domain.accounts.models import Account
from app.domain.transactions.models import Transaction
from app.domain.users.models import User


class UserRepository(Repository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive lookup."""
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def _delete_dependents(self, entity_id: int) -> None:
        account_ids = select(Account.id).where(Account.user_id == entity_id)
        await self.db.execute(delete(Transaction).where(Transaction.account_id.in_(account_ids)))
        await self.db.execute(delete(Account).where(Account.user_id == entity_id))
