import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select, func

from app.core.exceptions import database_error
from app.models.like import Like
from app.models.tuit import Tuit
from app.models.user import User
from app.schemas.common import DeleteStatus

logger = logging.getLogger(__name__)


async def find_all_users_that_liked_tuit(db: AsyncSession, tid: str) -> List[Tuple[Like, Optional[User]]]:
    """Likes of a tuit, each paired with the user who liked it"""
    try:
        result = await db.execute(
            select(Like, User)
            .outerjoin(User, User.id == Like.liked_by)
            .where(Like.tuit == tid)
        )
        return result.all()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("fetch likes for tuit", e)


async def find_all_tuits_liked_by_user(db: AsyncSession, uid: str) -> List[Tuple[Like, Optional[Tuit]]]:
    """Likes made by a user, each paired with the liked tuit"""
    try:
        result = await db.execute(
            select(Like, Tuit)
            .outerjoin(Tuit, Tuit.id == Like.tuit)
            .where(Like.liked_by == uid)
        )
        return result.all()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("fetch likes for user", e)


async def user_likes_tuit(db: AsyncSession, uid: str, tid: str) -> Like:
    try:
        like = Like(tuit=tid, liked_by=uid)
        db.add(like)
        await db.commit()
        await db.refresh(like)
        logger.info(f"User {uid} liked tuit {tid}")
        return like
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("create like", e)


async def user_unlikes_tuit(db: AsyncSession, uid: str, tid: str) -> DeleteStatus:
    """Delete at most one like for the pair"""
    try:
        result = await db.execute(
            select(Like).where(Like.tuit == tid, Like.liked_by == uid).limit(1)
        )
        like = result.scalars().first()
        if like is None:
            return DeleteStatus(deleted_count=0)

        await db.delete(like)
        await db.commit()
        logger.info(f"User {uid} unliked tuit {tid}")
        return DeleteStatus(deleted_count=1)
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("delete like", e)


async def count_how_many_liked_tuit(db: AsyncSession, tid: str) -> int:
    try:
        result = await db.execute(
            select(func.count()).select_from(Like).where(Like.tuit == tid)
        )
        return result.scalar_one()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("count likes", e)
