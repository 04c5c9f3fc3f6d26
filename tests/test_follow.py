import pytest
from httpx import AsyncClient

from app.crud.follow import (
    find_users_followed_by_user,
    find_users_following_user,
    user_follows_user,
    user_unfollows_user,
)
from app.models.user import User


async def create_user(client: AsyncClient, username: str) -> dict:
    response = await client.post(
        "/api/users",
        json={"username": username, "password": f"{username}-secret", "first_name": username.title()}
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_following_lists_followed_users(client: AsyncClient):
    alice = await create_user(client, "alice")
    bob = await create_user(client, "bob")
    carol = await create_user(client, "carol")

    for followed in (bob, carol):
        response = await client.post(f"/api/users/{alice['id']}/follows/{followed['id']}")
        assert response.status_code == 200
        data = response.json()
        assert data["user_following"] == alice["id"]
        assert data["user_followed"] == followed["id"]
        assert data["id"]

    response = await client.get(f"/api/users/{alice['id']}/following")
    assert response.status_code == 200
    following = response.json()
    assert len(following) == 2
    assert {f["user_followed"]["username"] for f in following} == {"bob", "carol"}
    assert all(f["user_following"] == alice["id"] for f in following)
    assert all("password" not in f["user_followed"] for f in following)
    assert all("hashed_password" not in f["user_followed"] for f in following)


@pytest.mark.asyncio
async def test_followers_lists_following_users(client: AsyncClient):
    alice = await create_user(client, "alice")
    bob = await create_user(client, "bob")
    carol = await create_user(client, "carol")

    await client.post(f"/api/users/{alice['id']}/follows/{carol['id']}")
    await client.post(f"/api/users/{bob['id']}/follows/{carol['id']}")
    await client.post(f"/api/users/{carol['id']}/follows/{alice['id']}")

    response = await client.get(f"/api/users/{carol['id']}/followers")
    assert response.status_code == 200
    followers = response.json()
    assert {f["user_following"]["username"] for f in followers} == {"alice", "bob"}
    assert all(f["user_followed"] == carol["id"] for f in followers)

    response = await client.get(f"/api/users/{bob['id']}/followers")
    assert response.json() == []


@pytest.mark.asyncio
async def test_follow_is_not_deduplicated(client: AsyncClient):
    alice = await create_user(client, "alice")
    bob = await create_user(client, "bob")

    first = await client.post(f"/api/users/{alice['id']}/follows/{bob['id']}")
    second = await client.post(f"/api/users/{alice['id']}/follows/{bob['id']}")
    assert first.json()["id"] != second.json()["id"]

    response = await client.get(f"/api/users/{alice['id']}/following")
    assert len(response.json()) == 2

    response = await client.get(f"/api/users/{bob['id']}/follows/counts")
    assert response.json() == {"followers": 2, "following": 0}


@pytest.mark.asyncio
async def test_unfollow_removes_one_edge_per_call(client: AsyncClient):
    alice = await create_user(client, "alice")
    bob = await create_user(client, "bob")

    await client.post(f"/api/users/{alice['id']}/follows/{bob['id']}")
    await client.post(f"/api/users/{alice['id']}/follows/{bob['id']}")

    url = f"/api/users/{alice['id']}/follows/{bob['id']}"
    response = await client.delete(url)
    assert response.status_code == 200
    assert response.json() == {"acknowledged": True, "deleted_count": 1}

    response = await client.get(f"/api/users/{alice['id']}/following")
    assert len(response.json()) == 1

    assert (await client.delete(url)).json()["deleted_count"] == 1
    assert (await client.delete(url)).json()["deleted_count"] == 0

    response = await client.get(f"/api/users/{alice['id']}/following")
    assert response.json() == []


@pytest.mark.asyncio
async def test_follow_of_unknown_user_populates_null(client: AsyncClient):
    alice = await create_user(client, "alice")

    response = await client.post(f"/api/users/{alice['id']}/follows/not-a-user")
    assert response.status_code == 200

    response = await client.get(f"/api/users/{alice['id']}/following")
    following = response.json()
    assert len(following) == 1
    assert following[0]["user_followed"] is None

    response = await client.get("/api/users/not-a-user/followers")
    followers = response.json()
    assert followers[0]["user_following"]["username"] == "alice"


@pytest.mark.asyncio
async def test_follow_dao_pairs_edges_with_users(async_test_session):
    dan = User(username="dan")
    dan.set_password("pw")
    erin = User(username="erin")
    erin.set_password("pw")
    async_test_session.add(dan)
    async_test_session.add(erin)
    await async_test_session.commit()

    follow = await user_follows_user(async_test_session, dan.id, erin.id)
    assert follow.user_following == dan.id

    rows = await find_users_followed_by_user(async_test_session, dan.id)
    assert [(f.id, u.username) for f, u in rows] == [(follow.id, "erin")]

    rows = await find_users_following_user(async_test_session, erin.id)
    assert [(f.id, u.username) for f, u in rows] == [(follow.id, "dan")]

    status = await user_unfollows_user(async_test_session, erin.id, dan.id)
    assert status.deleted_count == 0
    status = await user_unfollows_user(async_test_session, dan.id, erin.id)
    assert status.deleted_count == 1
    assert await find_users_following_user(async_test_session, erin.id) == []
