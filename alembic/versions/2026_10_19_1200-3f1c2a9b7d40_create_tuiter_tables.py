"""create_tuiter_tables

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c2a9b7d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("bio", sa.String(length=500), nullable=True),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("joined", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_username", "user", ["username"], unique=True)

    op.create_table(
        "tuit",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("tuit", sa.String(length=280), nullable=False),
        sa.Column("posted_by", sa.String(), nullable=False),
        sa.Column("posted_on", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_tuit_posted_by", "tuit", ["posted_by"])

    # Edge tables carry no uniqueness constraint on the pair
    op.create_table(
        "follow",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("user_following", sa.String(), nullable=False),
        sa.Column("user_followed", sa.String(), nullable=False),
    )
    op.create_index("ix_follow_user_following", "follow", ["user_following"])
    op.create_index("ix_follow_user_followed", "follow", ["user_followed"])

    op.create_table(
        "like",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("tuit", sa.String(), nullable=False),
        sa.Column("liked_by", sa.String(), nullable=False),
    )
    op.create_index("ix_like_tuit", "like", ["tuit"])
    op.create_index("ix_like_liked_by", "like", ["liked_by"])


def downgrade() -> None:
    op.drop_index("ix_like_liked_by", table_name="like")
    op.drop_index("ix_like_tuit", table_name="like")
    op.drop_table("like")
    op.drop_index("ix_follow_user_followed", table_name="follow")
    op.drop_index("ix_follow_user_following", table_name="follow")
    op.drop_table("follow")
    op.drop_index("ix_tuit_posted_by", table_name="tuit")
    op.drop_table("tuit")
    op.drop_index("ix_user_username", table_name="user")
    op.drop_table("user")
