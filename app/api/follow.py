"""
Follow endpoints:

- GET    /api/users/{uid}/following                        users followed by uid
- GET    /api/users/{uid}/followers                        users following uid
- POST   /api/users/{uid_following}/follows/{uid_followed} record a follow
- DELETE /api/users/{uid_following}/follows/{uid_followed} remove one follow
- GET    /api/users/{uid}/follows/counts                   follower/following totals

User ids are passed through to the store as-is.
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.crud import follow as follow_dao
from app.schemas.common import DeleteStatus
from app.schemas.follow import FollowRead, FollowerRead, FollowingRead, FollowCounts
from app.schemas.user import UserRead

router = APIRouter(prefix="/users", tags=["follow"])


def _user_or_none(user):
    return UserRead.model_validate(user) if user is not None else None


@router.get("/{uid}/following", response_model=List[FollowingRead])
async def find_users_followed_by_user(uid: str, db: AsyncSession = Depends(get_db)):
    rows = await follow_dao.find_users_followed_by_user(db, uid)
    return [
        FollowingRead(
            id=follow.id,
            user_following=follow.user_following,
            user_followed=_user_or_none(user),
        )
        for follow, user in rows
    ]


@router.get("/{uid}/followers", response_model=List[FollowerRead])
async def find_users_following_user(uid: str, db: AsyncSession = Depends(get_db)):
    rows = await follow_dao.find_users_following_user(db, uid)
    return [
        FollowerRead(
            id=follow.id,
            user_following=_user_or_none(user),
            user_followed=follow.user_followed,
        )
        for follow, user in rows
    ]


@router.post("/{uid_following}/follows/{uid_followed}", response_model=FollowRead)
async def user_follows_user(uid_following: str, uid_followed: str, db: AsyncSession = Depends(get_db)):
    return await follow_dao.user_follows_user(db, uid_following, uid_followed)


@router.delete("/{uid_following}/follows/{uid_followed}", response_model=DeleteStatus)
async def user_unfollows_user(uid_following: str, uid_followed: str, db: AsyncSession = Depends(get_db)):
    return await follow_dao.user_unfollows_user(db, uid_following, uid_followed)


@router.get("/{uid}/follows/counts", response_model=FollowCounts)
async def follow_counts(uid: str, db: AsyncSession = Depends(get_db)):
    return FollowCounts(
        followers=await follow_dao.count_followers(db, uid),
        following=await follow_dao.count_following(db, uid),
    )
