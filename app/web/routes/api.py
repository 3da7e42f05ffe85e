"""JSON API router mounted under ``/api``."""
from __future__ import annotations

from fastapi import APIRouter

from app.web.routes import accounts
from app.web.routes import transactions
from app.web.routes import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
