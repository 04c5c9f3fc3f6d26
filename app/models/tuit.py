from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from app.models.user import generate_uuid, utcnow


class Tuit(SQLModel, table=True):
    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tuit: str = Field(..., min_length=1, max_length=280)
    posted_by: str = Field(index=True)
    posted_on: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
