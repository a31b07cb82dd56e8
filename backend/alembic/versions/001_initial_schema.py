"""Initial schema — films catalog with provenance columns.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "films",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("uid", sa.String(64), nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("episode_id", sa.Integer, nullable=False),
        sa.Column("opening_crawl", sa.Text, nullable=False),
        sa.Column("director", sa.String(200), nullable=False),
        sa.Column("producer", sa.String(500), nullable=False),
        sa.Column("release_date", sa.String(10), nullable=False),
        sa.Column("characters", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("planets", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("starships", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("vehicles", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("species", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("url", sa.String(500), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("source", sa.String(10), nullable=False, server_default="local"),
        sa.Column("is_modified", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("last_sync_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_films_uid", "films", ["uid"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_films_uid", table_name="films")
    op.drop_table("films")
