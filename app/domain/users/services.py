"""Services for creating, updating and deleting users."""
from __future__ import annotations

import hashlib
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BadRequest, Conflict, NotFound
from app.core.security import hash_password
from app.core.validation import is_blank, require_non_blank
from app.domain.users.models import User
from app.domain.users.repository import UserRepository
from app.domain.users.schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)
security_logger = logging.getLogger("app.security")


def _email_hash(email: str) -> str:
    return hashlib.sha256(email.encode()).hexdigest()[:12]


async def list_users(db: AsyncSession) -> list[User]:
    return await UserRepository(db).get_all()


async def get_user(db: AsyncSession, user_id: int) -> User:
    """Return the user or raise 404."""
    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        raise NotFound("User")
    return user


async def create_user(db: AsyncSession, payload: UserCreate) -> User:
    if is_blank(payload.email) or not payload.password:
        raise BadRequest("Email and password are required")

    repo = UserRepository(db)
    if await repo.get_by_email(payload.email):
        raise Conflict("User with this email already exists")

    password_hash = hash_password(payload.password)

    try:
        user = await repo.create(email=payload.email, password_hash=password_hash)
    except IntegrityError:
        await db.rollback()
        logger.warning("IntegrityError while creating user", exc_info=True)
        raise Conflict("User with this email already exists") from None

    logger.info("Created user %s", user.id)
    return user


async def update_user(db: AsyncSession, user_id: int, payload: UserUpdate) -> User:
    """Apply the supplied fields; absent or null keys leave the user unchanged."""
    repo = UserRepository(db)
    user = await get_user(db, user_id)

    update_data = {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None
    }
    if not update_data:
        return user

    changes: dict[str, str] = {}

    if "email" in update_data:
        email = require_non_blank(update_data["email"], "Email must not be empty")
        existing = await repo.get_by_email(email)
        if existing is not None and existing.id != user.id:
            raise Conflict("Email already taken")
        changes["email"] = email

    if "password" in update_data:
        if not update_data["password"]:
            raise BadRequest("Password must not be empty")
        changes["password_hash"] = hash_password(update_data["password"])

    try:
        user = await repo.save(user, **changes)
    except IntegrityError:
        await db.rollback()
        logger.warning("IntegrityError while updating user %s", user_id, exc_info=True)
        raise Conflict("Email already taken") from None

    if "password_hash" in changes:
        security_logger.info("Password changed [user_id=%s]", user.id)
    return user


async def delete_user(db: AsyncSession, user_id: int) -> None:
    """Delete the user together with its accounts and their transactions."""
    user = await get_user(db, user_id)
    email_hash = _email_hash(user.email)

    if not await UserRepository(db).delete(user_id):
        raise NotFound("User")

    security_logger.info("User deleted [user_id=%s, email_hash=%s]", user_id, email_hash)
