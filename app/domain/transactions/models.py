from datetime import date

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    ForeignKey,
    Text,
    Index,
)
from sqlalchemy.orm import relationship

from app.core.database import Base, utcnow
from app.core.money import Money
from app.domain.accounts.models import Account  # noqa: F401


def _today() -> date:
    return utcnow().date()


class Transaction(Base):
    """Income or expense event against one account.

    ``amount`` is a non-negative magnitude; the direction lives in
    ``transaction_type``.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_account_date", "account_id", "transaction_date"),
        Index("ix_transactions_type_date", "transaction_type", "transaction_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    amount = Column(Money(), nullable=False)
    transaction_type = Column(String, nullable=False)  # income, expense
    category = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    transaction_date = Column(Date, default=_today, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    account = relationship("Account", lazy="joined")
