"""create playlists tables

Revision ID: 3c9d1e2f4a7b
Revises:
Create Date: 2026-10-18

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c9d1e2f4a7b"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Playlists",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        "PlaylistMovies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tmdb_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "playlist_id",
            sa.Integer(),
            sa.ForeignKey("Playlists.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index(
        "ix_PlaylistMovies_playlist_id", "PlaylistMovies", ["playlist_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_PlaylistMovies_playlist_id", table_name="PlaylistMovies")
    op.drop_table("PlaylistMovies")
    op.drop_table("Playlists")
