from pydantic import BaseModel
from typing import Optional

from app.schemas.user import UserRead


class FollowRead(BaseModel):
    id: str
    user_following: str
    user_followed: str

    class Config:
        from_attributes = True


class FollowerRead(BaseModel):
    """Follow edge with the following user populated"""
    id: str
    user_following: Optional[UserRead]
    user_followed: str


class FollowingRead(BaseModel):
    """Follow edge with the followed user populated"""
    id: str
    user_following: str
    user_followed: Optional[UserRead]


class FollowCounts(BaseModel):
    followers: int
    following: int
