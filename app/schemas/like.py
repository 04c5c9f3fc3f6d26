from pydantic import BaseModel
from typing import Optional

from app.schemas.tuit import TuitRead
from app.schemas.user import UserRead


class LikeRead(BaseModel):
    id: str
    tuit: str
    liked_by: str

    class Config:
        from_attributes = True


class TuitLikeRead(BaseModel):
    """Like edge with the liking user populated"""
    id: str
    tuit: str
    liked_by: Optional[UserRead]


class UserLikeRead(BaseModel):
    """Like edge with the liked tuit populated"""
    id: str
    tuit: Optional[TuitRead]
    liked_by: str


class LikeCount(BaseModel):
    tuit: str
    count: int
