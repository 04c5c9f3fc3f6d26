import pytest
from httpx import AsyncClient

from app.models.follow import Follow


async def drop_follow_table(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Follow.__table__.drop)


@pytest.mark.asyncio
async def test_store_failures_become_database_errors(client: AsyncClient, async_test_engine):
    await drop_follow_table(async_test_engine)

    response = await client.get("/api/users/u1/following")
    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "DATABASE_ERROR"
    assert body["detail"] == "Failed to fetch following"

    response = await client.post("/api/users/u1/follows/u2")
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to create follow", "error_code": "DATABASE_ERROR"}

    response = await client.delete("/api/users/u1/follows/u2")
    assert response.status_code == 500
    assert response.json()["error_code"] == "DATABASE_ERROR"


@pytest.mark.asyncio
async def test_database_error_does_not_leak_sql(client: AsyncClient, async_test_engine):
    await drop_follow_table(async_test_engine)

    response = await client.get("/api/users/u1/followers")
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail == "Failed to fetch followers"
    assert "SELECT" not in detail


@pytest.mark.asyncio
async def test_session_is_usable_after_database_error(client: AsyncClient, async_test_engine):
    await drop_follow_table(async_test_engine)

    assert (await client.get("/api/users/u1/following")).status_code == 500
    assert (await client.post("/api/users/u1/follows/u2")).status_code == 500

    # The same request session is shared by every call in the test
    response = await client.post("/api/users/u1/likes/t1")
    assert response.status_code == 200
    assert response.json()["liked_by"] == "u1"

    response = await client.get("/api/users/u1/likes")
    assert response.status_code == 200
    assert len(response.json()) == 1
