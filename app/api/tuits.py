from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.crud.tuit import (
    get_all_tuits,
    get_tuit_or_404,
    get_tuits_by_user,
    create_tuit,
    delete_tuit,
)
from app.schemas.common import DeleteStatus
from app.schemas.tuit import TuitCreate, TuitRead

router = APIRouter(tags=["tuits"])


@router.get("/tuits", response_model=List[TuitRead])
async def find_all_tuits(db: AsyncSession = Depends(get_db)):
    return await get_all_tuits(db)


@router.get("/tuits/{tid}", response_model=TuitRead)
async def find_tuit_by_id(tid: str, db: AsyncSession = Depends(get_db)):
    return await get_tuit_or_404(db, tid)


@router.get("/users/{uid}/tuits", response_model=List[TuitRead])
async def find_tuits_by_user(uid: str, db: AsyncSession = Depends(get_db)):
    return await get_tuits_by_user(db, uid)


@router.post("/users/{uid}/tuits", response_model=TuitRead, status_code=status.HTTP_201_CREATED)
async def post_tuit(uid: str, tuit_in: TuitCreate, db: AsyncSession = Depends(get_db)):
    return await create_tuit(db, uid, tuit_in)


@router.delete("/tuits/{tid}", response_model=DeleteStatus)
async def remove_tuit(tid: str, db: AsyncSession = Depends(get_db)):
    return await delete_tuit(db, tid)
