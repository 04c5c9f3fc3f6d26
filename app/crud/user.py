import logging
from typing import List, Optional

from fastapi import status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.exceptions import CustomHTTPException, database_error
from app.models.user import User
from app.schemas.common import DeleteStatus
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "USER_NOT_FOUND"
USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"


async def get_user_by_id(session: AsyncSession, user_id: str) -> Optional[User]:
    try:
        result = await session.execute(select(User).where(User.id == user_id))
        return result.scalars().first()
    except SQLAlchemyError as e:
        await session.rollback()
        raise database_error("retrieve user", e)


async def get_user_or_404(session: AsyncSession, user_id: str) -> User:
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise CustomHTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_id} not found",
            error_code=USER_NOT_FOUND
        )
    return user


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    try:
        result = await session.execute(select(User).where(User.username == username))
        return result.scalars().first()
    except SQLAlchemyError as e:
        await session.rollback()
        raise database_error("retrieve user", e)


async def get_multi(session: AsyncSession) -> List[User]:
    try:
        result = await session.execute(select(User).order_by(User.joined))
        return result.scalars().all()
    except SQLAlchemyError as e:
        await session.rollback()
        raise database_error("retrieve users", e)


async def create_user(session: AsyncSession, user_data: UserCreate) -> User:
    """Create a new user; usernames are unique"""
    if await get_user_by_username(session, user_data.username):
        raise CustomHTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already registered",
            error_code=USER_ALREADY_EXISTS
        )

    try:
        db_user = User(**user_data.model_dump(exclude={"password"}))
        db_user.set_password(user_data.password)
        session.add(db_user)
        await session.commit()
        await session.refresh(db_user)
        logger.info(f"Created user {db_user.id} ({db_user.username})")
        return db_user
    except IntegrityError as e:
        await session.rollback()
        logger.warning(f"Integrity error creating user {user_data.username}: {e}")
        raise CustomHTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already registered",
            error_code=USER_ALREADY_EXISTS
        )
    except SQLAlchemyError as e:
        await session.rollback()
        raise database_error("create user", e)


async def delete_user(session: AsyncSession, user_id: str) -> DeleteStatus:
    """Delete the user row only; follow/like edges referencing it are kept"""
    user = await get_user_by_id(session, user_id)
    if user is None:
        return DeleteStatus(deleted_count=0)

    try:
        await session.delete(user)
        await session.commit()
        logger.info(f"Deleted user {user_id}")
        return DeleteStatus(deleted_count=1)
    except SQLAlchemyError as e:
        await session.rollback()
        raise database_error("delete user", e)
