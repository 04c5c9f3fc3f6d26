from sqlmodel import SQLModel, Field

from app.models.user import generate_uuid


class Follow(SQLModel, table=True):
    """Directed follow edge; duplicate pairs are stored as separate rows"""

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    user_following: str = Field(
        index=True  # For faster following queries
    )
    user_followed: str = Field(
        index=True  # For faster follower queries
    )
