from datetime import datetime
from pydantic import BaseModel, Field


class TuitCreate(BaseModel):
    tuit: str = Field(..., min_length=1, max_length=280)


class TuitRead(BaseModel):
    id: str
    tuit: str
    posted_by: str
    posted_on: datetime

    class Config:
        from_attributes = True
