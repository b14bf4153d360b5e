"""
VideoGame API - VideoGame Service (Catalog Data Access)
=========================================================

What:  One data-access function per catalog operation.
How:   Each method issues exactly one SQL statement through the request's
       AsyncSession and converts the outcome into a response model or an
       application exception. Writes use explicit INSERT/UPDATE/DELETE
       statements with RETURNING; nothing relies on ORM change tracking.
Who:   Called by the route handlers in app/routes/videogames.py.

Operation Map:
    ┌────────────────────────┬──────────────────────────────────────────┐
    │ list_video_games       │ SELECT * FROM VideoGames                 │
    │ get_video_game         │ SELECT ... WHERE id = :id                │
    │ list_titles/…          │ SELECT title FROM VideoGames             │
    │ list_by_developer/…    │ SELECT ... WHERE lower(col) = lower(:v)  │
    │ create_video_game      │ INSERT ... RETURNING                     │
    │ update_video_game      │ UPDATE ... WHERE id = :id RETURNING      │
    │ delete_video_game      │ DELETE ... WHERE id = :id RETURNING      │
    └────────────────────────┴──────────────────────────────────────────┘

Error Handling:
    - Absent body               → ValidationError (400)
    - Path id != payload id     → IdMismatchError (400), before any storage call
    - Id outside INTEGER range  → NotFoundError (404), before any storage call
    - No matching row           → NotFoundError (404)
    - SQLAlchemyError           → logged, wrapped in DatabaseError (500)
    Nothing is retried.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, IdMismatchError, NotFoundError, ValidationError
from app.models.video_game import VideoGame
from app.schemas.video_game import VideoGameCreate, VideoGameResponse, VideoGameUpdate

logger = logging.getLogger(__name__)

# Columns returned by INSERT/UPDATE/DELETE ... RETURNING
_RETURNING = (
    VideoGame.id,
    VideoGame.title,
    VideoGame.platform,
    VideoGame.developer,
    VideoGame.publisher,
)

# Bounds of the 32-bit INTEGER id column; no row can exist outside them
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1


class VideoGameService:
    """
    Stateless data-access layer for the VideoGame catalog.

    Every public method receives the request's session. Reads leave the
    transaction to get_db_session; writes commit immediately after their
    statement so the change is durable before the response is built.
    """

    # ── Statement helpers ─────────────────────────────────────────────────

    async def _execute(self, db: AsyncSession, statement: Any, action: str) -> Result:
        """Run one statement, translating driver failures into DatabaseError."""
        try:
            return await db.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Database error while %s: %s", action, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not complete the request while {action}. Please try again.",
                context={"action": action, "error_type": type(e).__name__},
            ) from e

    async def _commit(self, db: AsyncSession, action: str) -> None:
        try:
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Commit failed while %s: %s", action, str(e), exc_info=True)
            await db.rollback()
            raise DatabaseError(
                context={"action": action, "error_type": type(e).__name__},
            ) from e

    def _check_id_range(self, video_game_id: int) -> None:
        # Drivers reject out-of-range integers before the query runs
        # (OverflowError on SQLite, DataError on asyncpg)
        if not _MIN_ID <= video_game_id <= _MAX_ID:
            raise NotFoundError(resource="video game", resource_id=str(video_game_id))

    # ══════════════════════════════════════════════════════════════════════
    # Query surface (read-only)
    # ══════════════════════════════════════════════════════════════════════

    async def list_video_games(self, db: AsyncSession) -> List[VideoGameResponse]:
        """Every record, unfiltered, in the database's natural order."""
        result = await self._execute(db, select(VideoGame), "listing video games")
        return [VideoGameResponse.model_validate(game) for game in result.scalars().all()]

    async def get_video_game(self, db: AsyncSession, video_game_id: int) -> VideoGameResponse:
        """
        Retrieve a single record by id.

        Raises:
            NotFoundError: No row with that id (→ 404)
        """
        self._check_id_range(video_game_id)
        result = await self._execute(
            db,
            select(VideoGame).where(VideoGame.id == video_game_id),
            f"fetching video game {video_game_id}",
        )
        game = result.scalar_one_or_none()
        if game is None:
            raise NotFoundError(resource="video game", resource_id=str(video_game_id))
        return VideoGameResponse.model_validate(game)

    async def _list_column(self, db: AsyncSession, column: Any, label: str) -> List[Optional[str]]:
        # Duplicates and nulls are returned as stored, one entry per record
        result = await self._execute(db, select(column), f"listing {label}")
        return list(result.scalars().all())

    async def list_titles(self, db: AsyncSession) -> List[Optional[str]]:
        return await self._list_column(db, VideoGame.title, "titles")

    async def list_developers(self, db: AsyncSession) -> List[Optional[str]]:
        return await self._list_column(db, VideoGame.developer, "developers")

    async def list_publishers(self, db: AsyncSession) -> List[Optional[str]]:
        return await self._list_column(db, VideoGame.publisher, "publishers")

    async def _filter_by(
        self,
        db: AsyncSession,
        column: Any,
        value: str,
        label: str,
    ) -> List[VideoGameResponse]:
        """
        Case-insensitive exact match on one text column.

        Rows whose column is NULL never match (lower(NULL) is NULL).

        Raises:
            NotFoundError: Nothing matched (→ 404)
        """
        result = await self._execute(
            db,
            select(VideoGame).where(func.lower(column) == value.lower()),
            f"filtering video games by {label}",
        )
        games = result.scalars().all()
        if not games:
            raise NotFoundError(
                resource=label,
                resource_id=value,
                message=f"No video games found for {label} '{value}'",
            )
        return [VideoGameResponse.model_validate(game) for game in games]

    async def list_by_developer(self, db: AsyncSession, developer: str) -> List[VideoGameResponse]:
        return await self._filter_by(db, VideoGame.developer, developer, "developer")

    async def list_by_platform(self, db: AsyncSession, platform: str) -> List[VideoGameResponse]:
        return await self._filter_by(db, VideoGame.platform, platform, "platform")

    # ══════════════════════════════════════════════════════════════════════
    # Mutation surface
    # ══════════════════════════════════════════════════════════════════════

    async def create_video_game(
        self,
        db: AsyncSession,
        payload: Optional[VideoGameCreate],
    ) -> VideoGameResponse:
        """
        Insert a new record and return it with its database-assigned id.

        Raises:
            ValidationError: No body was sent (→ 400)
        """
        if payload is None:
            raise ValidationError(message="A video game body is required", field="body")

        result = await self._execute(
            db,
            insert(VideoGame).values(**payload.model_dump()).returning(*_RETURNING),
            "creating a video game",
        )
        created = VideoGameResponse.model_validate(result.one())
        await self._commit(db, "creating a video game")

        logger.info("Video game %d created: %s", created.id, created.title)
        return created

    async def update_video_game(
        self,
        db: AsyncSession,
        video_game_id: int,
        payload: Optional[VideoGameUpdate],
    ) -> None:
        """
        Overwrite all four text fields of an existing record.

        Raises:
            ValidationError: No body was sent (→ 400)
            IdMismatchError: payload.id differs from the path id (→ 400)
            NotFoundError:   No row with that id (→ 404)
        """
        if payload is None:
            raise ValidationError(message="A video game body is required", field="body")
        if payload.id != video_game_id:
            raise IdMismatchError(path_id=video_game_id, payload_id=payload.id)
        self._check_id_range(video_game_id)

        result = await self._execute(
            db,
            update(VideoGame)
            .where(VideoGame.id == video_game_id)
            .values(**payload.to_values())
            .returning(VideoGame.id)
            .execution_options(synchronize_session=False),
            f"updating video game {video_game_id}",
        )
        if result.one_or_none() is None:
            raise NotFoundError(resource="video game", resource_id=str(video_game_id))
        await self._commit(db, f"updating video game {video_game_id}")

        logger.info("Video game %d updated", video_game_id)

    async def delete_video_game(self, db: AsyncSession, video_game_id: int) -> VideoGameResponse:
        """
        Remove a record and return it as it was before deletion.

        Raises:
            NotFoundError: No row with that id (→ 404)
        """
        self._check_id_range(video_game_id)
        result = await self._execute(
            db,
            delete(VideoGame)
            .where(VideoGame.id == video_game_id)
            .returning(*_RETURNING)
            .execution_options(synchronize_session=False),
            f"deleting video game {video_game_id}",
        )
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(resource="video game", resource_id=str(video_game_id))
        deleted = VideoGameResponse.model_validate(row)
        await self._commit(db, f"deleting video game {video_game_id}")

        logger.info("Video game %d deleted", video_game_id)
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
video_game_service = VideoGameService()
