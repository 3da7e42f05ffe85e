from sqlalchemy import Column, Integer, String, DateTime

from app.core.database import Base, utcnow


class User(Base):
    """Owner of accounts; the password is stored as a bcrypt hash only."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
