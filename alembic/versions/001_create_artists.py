"""Create artists table with filter indexes.

Revision ID: 001_create_artists
Revises: None
Create Date: 2025-09-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, UUID

revision: str = "001_create_artists"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "artists",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("genre", sa.Text, nullable=False),
        sa.Column("formation_year", sa.Integer, nullable=True),
        sa.Column("country", sa.Text, nullable=True),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("popular_albums", ARRAY(sa.Text), nullable=False, server_default=sa.text("ARRAY[]::TEXT[]")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("idx_artists_genre", "artists", ["genre"])
    op.create_index("idx_artists_country", "artists", ["country"])
    op.create_index("idx_artists_active", "artists", ["active"])
    op.create_index("idx_artists_formation_year", "artists", ["formation_year"])


def downgrade() -> None:
    op.drop_index("idx_artists_formation_year", table_name="artists")
    op.drop_index("idx_artists_active", table_name="artists")
    op.drop_index("idx_artists_country", table_name="artists")
    op.drop_index("idx_artists_genre", table_name="artists")
    op.drop_table("artists")
