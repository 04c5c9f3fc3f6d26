from sqlmodel import SQLModel, Field

from app.models.user import generate_uuid


class Like(SQLModel, table=True):
    """Edge from a user to a liked tuit"""

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tuit: str = Field(index=True)
    liked_by: str = Field(index=True)
