"""Shared fixtures: a fresh SQLite database per test and an API client bound to it."""
from __future__ import annotations

import os

# Must be set before the application settings are imported.
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from pathlib import Path  # noqa: E402
from typing import Any, Optional  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from app.core.database import create_engine_for_url, create_session_factory, get_db, init_db  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
async def engine(tmp_path: Path):
    """File-backed so every session sees the same state."""
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'ledger-test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    async def _create(email: str = "alice@example.com", password: str = "s3cret-pass") -> dict[str, Any]:
        response = await client.post("/api/users", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_account(client):
    async def _create(user_id: int, name: str = "Checking", balance: Optional[Any] = None) -> dict[str, Any]:
        body: dict[str, Any] = {"userId": user_id, "name": name}
        if balance is not None:
            body["balance"] = balance
        response = await client.post("/api/accounts", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_transaction(client):
    async def _create(account_id: int, amount: Any, type: str, **extra: Any) -> dict[str, Any]:
        body = {"accountId": account_id, "amount": amount, "type": type, **extra}
        response = await client.post("/api/transactions", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
