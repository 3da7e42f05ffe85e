from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.core.database import Base, utcnow
from app.core.money import ZERO, Money
from app.domain.users.models import User  # noqa: F401


class Account(Base):
    """Account model for user financial accounts.

    ``balance`` is set directly through the API and is never recomputed from
    the account's transactions.
    """

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, nullable=False)
    balance = Column(Money(), default=ZERO, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    user = relationship("User", lazy="joined")
