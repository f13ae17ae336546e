"""Create repos table

Revision ID: repos_001
Revises:
Create Date: 2026-10-16 00:00:00.000000

"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.sql import func

revision = "repos_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "repos",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("slug", sa.String(1024), nullable=False, unique=True, index=True),
        sa.Column("host", sa.String(255), nullable=False),
        sa.Column("owner", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("private", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("disabled", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("disabled_pr", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("scm", sa.String(25), nullable=False),
        sa.Column("url", sa.String(1024), nullable=False),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("password", sa.String(255), nullable=True),
        sa.Column("public_key", sa.Text, nullable=False),
        sa.Column("private_key", sa.Text, nullable=False),
        sa.Column("params", sa.JSON, nullable=True),
        sa.Column("timeout", sa.Integer, nullable=False),
        sa.Column("priveleged", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("user_id", sa.Integer, nullable=True, index=True),
        sa.Column("team_id", sa.Integer, nullable=True, index=True),
        sa.Column("created", sa.DateTime, server_default=func.now(), nullable=False),
        sa.Column("updated", sa.DateTime, server_default=func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("repos")
