from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.crud import like as like_dao
from app.schemas.common import DeleteStatus
from app.schemas.like import LikeRead, TuitLikeRead, UserLikeRead, LikeCount
from app.schemas.tuit import TuitRead
from app.schemas.user import UserRead

router = APIRouter(tags=["likes"])


@router.get("/users/{uid}/likes", response_model=List[UserLikeRead])
async def find_all_tuits_liked_by_user(uid: str, db: AsyncSession = Depends(get_db)):
    rows = await like_dao.find_all_tuits_liked_by_user(db, uid)
    return [
        UserLikeRead(
            id=like.id,
            tuit=TuitRead.model_validate(tuit) if tuit is not None else None,
            liked_by=like.liked_by,
        )
        for like, tuit in rows
    ]


@router.get("/tuits/{tid}/likes", response_model=List[TuitLikeRead])
async def find_all_users_that_liked_tuit(tid: str, db: AsyncSession = Depends(get_db)):
    rows = await like_dao.find_all_users_that_liked_tuit(db, tid)
    return [
        TuitLikeRead(
            id=like.id,
            tuit=like.tuit,
            liked_by=UserRead.model_validate(user) if user is not None else None,
        )
        for like, user in rows
    ]


@router.get("/tuits/{tid}/likes/count", response_model=LikeCount)
async def count_how_many_liked_tuit(tid: str, db: AsyncSession = Depends(get_db)):
    count = await like_dao.count_how_many_liked_tuit(db, tid)
    return LikeCount(tuit=tid, count=count)


@router.post("/users/{uid}/likes/{tid}", response_model=LikeRead)
async def user_likes_tuit(uid: str, tid: str, db: AsyncSession = Depends(get_db)):
    return await like_dao.user_likes_tuit(db, uid, tid)


@router.delete("/users/{uid}/unlikes/{tid}", response_model=DeleteStatus)
async def user_unlikes_tuit(uid: str, tid: str, db: AsyncSession = Depends(get_db)):
    return await like_dao.user_unlikes_tuit(db, uid, tid)
