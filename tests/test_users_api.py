import re

from app.core.security import verify_password
from app.domain.users.repository import UserRepository

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


async def test_create_user_returns_public_fields_only(client):
    response = await client.post("/api/users", json={"email": "alice@example.com", "password": "s3cret"})

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "email", "createdAt"}
    assert body["email"] == "alice@example.com"
    assert TIMESTAMP_RE.match(body["createdAt"])


async def test_password_is_stored_hashed(client, db):
    await client.post("/api/users", json={"email": "alice@example.com", "password": "s3cret"})

    user = await UserRepository(db).get_by_email("alice@example.com")

    assert user.password_hash != "s3cret"
    assert verify_password("s3cret", user.password_hash)


async def test_create_user_requires_email_and_password(client):
    for body in ({"email": "alice@example.com"}, {"password": "x"}, {"email": None, "password": "x"}, {}):
        response = await client.post("/api/users", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Email and password are required"}


async def test_create_user_without_body(client):
    response = await client.post("/api/users")
    assert response.status_code == 400


async def test_duplicate_email_is_a_conflict(client, create_user):
    await create_user(email="alice@example.com")

    response = await client.post("/api/users", json={"email": "alice@example.com", "password": "x"})

    assert response.status_code == 409
    assert response.json() == {"error": "User with this email already exists"}


async def test_email_comparison_is_case_sensitive(client, create_user):
    await create_user(email="alice@example.com")

    response = await client.post("/api/users", json={"email": "Alice@example.com", "password": "x"})

    assert response.status_code == 201


async def test_list_and_get_users(client, create_user):
    alice = await create_user(email="alice@example.com")
    bob = await create_user(email="bob@example.com")

    listing = await client.get("/api/users")
    assert listing.status_code == 200
    assert [user["id"] for user in listing.json()] == [alice["id"], bob["id"]]

    single = await client.get(f"/api/users/{bob['id']}")
    assert single.status_code == 200
    assert single.json() == bob


async def test_get_missing_user(client):
    response = await client.get("/api/users/999")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


async def test_non_integer_id_is_a_bad_request(client):
    response = await client.get("/api/users/abc")

    assert response.status_code == 400
    assert "error" in response.json()


async def test_update_email_taken_by_another_user(client, create_user):
    alice = await create_user(email="alice@example.com")
    await create_user(email="bob@example.com")

    response = await client.put(f"/api/users/{alice['id']}", json={"email": "bob@example.com"})

    assert response.status_code == 409
    assert response.json() == {"error": "Email already taken"}


async def test_update_email_to_own_email_succeeds(client, create_user):
    alice = await create_user(email="alice@example.com")

    response = await client.put(f"/api/users/{alice['id']}", json={"email": "alice@example.com"})

    assert response.status_code == 200
    assert response.json()["email"] == "alice@example.com"


async def test_update_user_fields(client, create_user, db):
    alice = await create_user(email="alice@example.com", password="old-pass")

    response = await client.put(
        f"/api/users/{alice['id']}",
        json={"email": "alice@new.example.com", "password": "new-pass"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "alice@new.example.com"
    assert body["createdAt"] == alice["createdAt"]

    user = await UserRepository(db).get_by_id(alice["id"])
    assert verify_password("new-pass", user.password_hash)


async def test_null_or_missing_fields_leave_user_unchanged(client, create_user):
    alice = await create_user(email="alice@example.com")

    for body in ({"email": None}, {}, {"unknown": "field"}):
        response = await client.put(f"/api/users/{alice['id']}", json=body)
        assert response.status_code == 200
        assert response.json() == alice


async def test_update_missing_user(client):
    response = await client.put("/api/users/999", json={"email": "x@example.com"})

    assert response.status_code == 404


async def test_delete_user_is_not_found_afterwards(client, create_user):
    alice = await create_user()

    response = await client.delete(f"/api/users/{alice['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}

    for _ in range(2):
        again = await client.delete(f"/api/users/{alice['id']}")
        assert again.status_code == 404
        assert again.json() == {"error": "User not found"}


async def test_delete_user_removes_its_accounts_and_transactions(
    client, create_user, create_account, create_transaction
):
    alice = await create_user()
    account = await create_account(alice["id"])
    transaction = await create_transaction(account["id"], "10.00", "income")

    await client.delete(f"/api/users/{alice['id']}")

    assert (await client.get(f"/api/accounts/{account['id']}")).status_code == 404
    assert (await client.get(f"/api/transactions/{transaction['id']}")).status_code == 404
