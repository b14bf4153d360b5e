"""
VideoGame API - VideoGame SQLAlchemy Model
============================================

What:  ORM model representing the `VideoGames` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by VideoGameService to build explicit SELECT/INSERT/UPDATE/DELETE
       statements, and by the seed helpers.

Table Design:
    - Integer primary key assigned by the database on insert (auto-increment),
      never written by the application afterwards
    - Four nullable text columns with no format or uniqueness constraints
    - No relationships, no soft-delete, no audit columns
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class VideoGame(Base):
    """
    One catalog entry.

    Lifecycle:
        1. Inserted by POST (id assigned by the database)
        2. Overwritten in place by PUT (all four text columns, nulls included)
        3. Removed by DELETE (hard delete)

    Query Patterns:
        - Get by id: SELECT ... WHERE id = :id (primary key lookup)
        - Filter: SELECT ... WHERE lower(developer) = lower(:name)
          (full scan; these columns carry no index)
    """

    __tablename__ = "VideoGames"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    platform: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    developer: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    publisher: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<VideoGame(id={self.id}, title='{self.title}', platform='{self.platform}')>"
