"""
Data access for follow edges.
Edges are plain rows; the same pair may be stored more than once.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select, func

from app.core.exceptions import database_error
from app.models.follow import Follow
from app.models.user import User
from app.schemas.common import DeleteStatus

logger = logging.getLogger(__name__)


async def find_users_following_user(db: AsyncSession, uid: str) -> List[Tuple[Follow, Optional[User]]]:
    """Follow edges pointing at uid, each paired with the following user"""
    try:
        result = await db.execute(
            select(Follow, User)
            .outerjoin(User, User.id == Follow.user_following)
            .where(Follow.user_followed == uid)
        )
        return result.all()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("fetch followers", e)


async def find_users_followed_by_user(db: AsyncSession, uid: str) -> List[Tuple[Follow, Optional[User]]]:
    """Follow edges starting at uid, each paired with the followed user"""
    try:
        result = await db.execute(
            select(Follow, User)
            .outerjoin(User, User.id == Follow.user_followed)
            .where(Follow.user_following == uid)
        )
        return result.all()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("fetch following", e)


async def find_follow(db: AsyncSession, uid_following: str, uid_followed: str) -> Optional[Follow]:
    try:
        result = await db.execute(
            select(Follow).where(
                Follow.user_following == uid_following,
                Follow.user_followed == uid_followed
            ).limit(1)
        )
        return result.scalars().first()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("fetch follow", e)


async def user_follows_user(db: AsyncSession, uid_following: str, uid_followed: str) -> Follow:
    try:
        follow_entry = Follow(user_following=uid_following, user_followed=uid_followed)
        db.add(follow_entry)
        await db.commit()
        await db.refresh(follow_entry)
        logger.info(f"User {uid_following} followed user {uid_followed}")
        return follow_entry
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("create follow", e)


async def user_unfollows_user(db: AsyncSession, uid_following: str, uid_followed: str) -> DeleteStatus:
    """Delete at most one edge for the pair"""
    follow_entry = await find_follow(db, uid_following, uid_followed)
    if follow_entry is None:
        return DeleteStatus(deleted_count=0)

    try:
        await db.delete(follow_entry)
        await db.commit()
        logger.info(f"User {uid_following} unfollowed user {uid_followed}")
        return DeleteStatus(deleted_count=1)
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("delete follow", e)


async def count_followers(db: AsyncSession, uid: str) -> int:
    try:
        result = await db.execute(
            select(func.count()).select_from(Follow).where(Follow.user_followed == uid)
        )
        return result.scalar_one()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("count followers", e)


async def count_following(db: AsyncSession, uid: str) -> int:
    try:
        result = await db.execute(
            select(func.count()).select_from(Follow).where(Follow.user_following == uid)
        )
        return result.scalar_one()
    except SQLAlchemyError as e:
        await db.rollback()
        raise database_error("count following", e)
