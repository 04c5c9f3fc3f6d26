from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.crud.user import get_multi, get_user_or_404, create_user, delete_user
from app.schemas.common import DeleteStatus
from app.schemas.user import UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserRead])
async def find_all_users(db: AsyncSession = Depends(get_db)):
    return await get_multi(db)


@router.get("/{uid}", response_model=UserRead)
async def find_user_by_id(uid: str, db: AsyncSession = Depends(get_db)):
    return await get_user_or_404(db, uid)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await create_user(db, user_in)


@router.delete("/{uid}", response_model=DeleteStatus)
async def remove_user(uid: str, db: AsyncSession = Depends(get_db)):
    return await delete_user(db, uid)
