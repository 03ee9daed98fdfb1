"""API tests for the user endpoints."""

import pytest
import pytest_asyncio

from tests.integration.api_fixtures import FakeStore, api_client, build_store


@pytest.fixture
def store() -> FakeStore:
    return build_store()


@pytest_asyncio.fixture
async def client(store: FakeStore):
    async with api_client(store) as client:
        yield client


@pytest.mark.asyncio
async def test_create_user_never_returns_password(client):
    response = await client.post(
        "/api/users", json={"email": "jane@example.com", "password": "s3cret"}
    )

    assert response.status_code == 201
    assert response.json() == {"data": {"id": 1, "email": "jane@example.com"}}


@pytest.mark.asyncio
async def test_create_user_duplicate_email(client, store: FakeStore):
    await client.post("/api/users", json={"email": "jane@example.com", "password": "first"})

    response = await client.post(
        "/api/users", json={"email": "jane@example.com", "password": "second"}
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": {"code": 400, "message": "User with given email already exists"}
    }
    user = await store.users.get_by_email("jane@example.com")
    assert user.password_hash == "hashed:first"


@pytest.mark.asyncio
async def test_create_user_invalid_json(client):
    response = await client.post(
        "/api/users", content=b"nope", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid JSON format"


@pytest.mark.asyncio
async def test_get_user(client):
    await client.post("/api/users", json={"email": "jane@example.com", "password": "pw"})

    response = await client.get("/api/users/jane@example.com")

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "jane@example.com"
    assert "password" not in response.json()["data"]


@pytest.mark.asyncio
async def test_get_user_not_found(client):
    response = await client.get("/api/users/ghost@example.com")

    assert response.status_code == 404
    assert response.json() == {"error": {"code": 404, "message": "No such user"}}
