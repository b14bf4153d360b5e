"""Seed VideoGames with the sample catalog

Revision ID: 002
Revises: 001
Create Date: 2025-01-10 00:05:00.000000+00:00

What:  Inserts the three sample records from app.seed.
How:   Rows are inserted without ids so the identity sequence hands out
       1, 2, 3 and stays in step for the next API insert.

Rollback: downgrade() deletes the sample rows by title.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from app.seed import SEED_VIDEO_GAMES

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


video_games = sa.table(
    "VideoGames",
    sa.column("id", sa.Integer),
    sa.column("title", sa.String),
    sa.column("platform", sa.String),
    sa.column("developer", sa.String),
    sa.column("publisher", sa.String),
)


def upgrade() -> None:
    op.bulk_insert(video_games, SEED_VIDEO_GAMES)


def downgrade() -> None:
    op.execute(
        video_games.delete().where(
            video_games.c.title.in_([game["title"] for game in SEED_VIDEO_GAMES])
        )
    )
