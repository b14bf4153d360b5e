"""
VideoGame API - Sample Catalog
================================

What:  The three sample records every fresh catalog starts with.
Who:   Alembic migration 002, the DB_BOOTSTRAP startup path, and the tests.

Records are inserted without ids so the database sequence assigns 1, 2, 3
and the next POST receives 4.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.video_game import VideoGame

logger = logging.getLogger(__name__)


SEED_VIDEO_GAMES: List[Dict[str, Optional[str]]] = [
    {
        "title": "Spider-Man 2",
        "platform": "PS5",
        "developer": "Insomniac Games",
        "publisher": "Sony Interactive Entertainment",
    },
    {
        "title": "The Legend of Zelda: Breath of the Wild",
        "platform": "Nintendo Switch",
        "developer": "Nintendo EPD",
        "publisher": "Nintendo",
    },
    {
        "title": "CyberPunk 2077",
        "platform": "PC",
        "developer": "CD Projekt Red",
        "publisher": "CD Projekt",
    },
]


async def seed_video_games(db: AsyncSession) -> int:
    """
    Insert the sample records when the table is empty.

    Returns the number of rows inserted (0 if the catalog already had data).
    The caller owns the transaction and commits.
    """
    count_result = await db.execute(select(func.count(VideoGame.id)))
    if count_result.scalar() or 0:
        return 0

    await db.execute(insert(VideoGame), SEED_VIDEO_GAMES)
    logger.info("Seeded %d sample video games", len(SEED_VIDEO_GAMES))
    return len(SEED_VIDEO_GAMES)
