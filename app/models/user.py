import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from passlib.context import CryptContext

# Password hashing configuration
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserBase(SQLModel):
    """Base fields shared across user schemas"""
    username: str = Field(..., min_length=1, max_length=50)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None)
    bio: Optional[str] = Field(default=None, max_length=500)


class User(UserBase, table=True):
    id: str = Field(default_factory=generate_uuid, primary_key=True)
    username: str = Field(..., unique=True, index=True)
    hashed_password: str = Field(default="")
    joined: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    def set_password(self, password: str) -> None:
        self.hashed_password = pwd_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return pwd_context.verify(password, self.hashed_password)
