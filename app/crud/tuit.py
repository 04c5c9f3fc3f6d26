import logging
from typing import List, Optional

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.exceptions import CustomHTTPException, database_error
from app.models.tuit import Tuit
from app.schemas.common import DeleteStatus
from app.schemas.tuit import TuitCreate

logger = logging.getLogger(__name__)

TUIT_NOT_FOUND = "TUIT_NOT_FOUND"


async def get_tuit_by_id(db: AsyncSession, tid: str) -> Optional[Tuit]:
    try:
        result = await db.execute(select(Tuit).where(Tuit.id == tid))
        return result.scalars().first()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("retrieve tuit", e)


async def get_tuit_or_404(db: AsyncSession, tid: str) -> Tuit:
    tuit = await get_tuit_by_id(db, tid)
    if tuit is None:
        raise CustomHTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tuit {tid} not found",
            error_code=TUIT_NOT_FOUND
        )
    return tuit


async def get_all_tuits(db: AsyncSession) -> List[Tuit]:
    try:
        result = await db.execute(select(Tuit).order_by(Tuit.posted_on.desc()))
        return result.scalars().all()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("retrieve tuits", e)


async def get_tuits_by_user(db: AsyncSession, uid: str) -> List[Tuit]:
    try:
        result = await db.execute(
            select(Tuit).where(Tuit.posted_by == uid).order_by(Tuit.posted_on.desc())
        )
        return result.scalars().all()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("retrieve tuits", e)


async def create_tuit(db: AsyncSession, uid: str, tuit_in: TuitCreate) -> Tuit:
    try:
        tuit = Tuit(tuit=tuit_in.tuit, posted_by=uid)
        db.add(tuit)
        await db.commit()
        await db.refresh(tuit)
        logger.info(f"User {uid} posted tuit {tuit.id}")
        return tuit
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("create tuit", e)


async def delete_tuit(db: AsyncSession, tid: str) -> DeleteStatus:
    tuit = await get_tuit_by_id(db, tid)
    if tuit is None:
        return DeleteStatus(deleted_count=0)

    try:
        await db.delete(tuit)
        await db.commit()
        logger.info(f"Deleted tuit {tid}")
        return DeleteStatus(deleted_count=1)
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("delete tuit", e)
