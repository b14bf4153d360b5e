"""
VideoGame API - VideoGame Route Handlers
==========================================

What:  The /api/videogame CRUD surface.
How:   Each handler extracts path/body data, makes one call into
       VideoGameService, and picks the HTTP status code. Errors raised by the
       service are formatted by the global exception handlers in main.py.

Route Table:
    GET    /api/videogame                      → 200 list
    GET    /api/videogame/titles               → 200 list of titles
    GET    /api/videogame/developer            → 200 list of developers
    GET    /api/videogame/developers/{name}    → 200 list | 404
    GET    /api/videogame/publisher            → 200 list of publishers
    GET    /api/videogame/platform/{name}      → 200 list | 404
    GET    /api/videogame/{id}                 → 200 record | 404
    POST   /api/videogame                      → 201 record + Location | 400
    PUT    /api/videogame/{id}                 → 204 | 400 | 404
    DELETE /api/videogame/{id}                 → 200 deleted record | 404

The collection routes also answer at /api/videogame/ (hidden from the
OpenAPI schema) instead of redirecting.

The fixed-segment GET routes are declared before GET /{id} so "titles" and
friends are never parsed as an id.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.video_game import (
    ErrorResponse,
    VideoGameCreate,
    VideoGameResponse,
    VideoGameUpdate,
)
from app.services.video_game_service import video_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/videogame", tags=["VideoGame"])

_NOT_FOUND = {404: {"description": "Video game not found", "model": ErrorResponse}}
_BAD_REQUEST = {400: {"description": "Missing body or id mismatch", "model": ErrorResponse}}


# ══════════════════════════════════════════════════════════════════════════
# Queries
# ══════════════════════════════════════════════════════════════════════════


@router.get("/", include_in_schema=False, response_model=List[VideoGameResponse])
@router.get(
    "",
    response_model=List[VideoGameResponse],
    summary="List all video games",
)
async def list_video_games(
    db: AsyncSession = Depends(get_db_session),
) -> List[VideoGameResponse]:
    return await video_game_service.list_video_games(db)


@router.get(
    "/titles",
    response_model=List[Optional[str]],
    summary="List the title of every video game",
    description="One entry per record; duplicates and nulls are kept.",
)
async def list_titles(db: AsyncSession = Depends(get_db_session)) -> List[Optional[str]]:
    return await video_game_service.list_titles(db)


@router.get(
    "/developer",
    response_model=List[Optional[str]],
    summary="List the developer of every video game",
    description="One entry per record; duplicates and nulls are kept.",
)
async def list_developers(db: AsyncSession = Depends(get_db_session)) -> List[Optional[str]]:
    return await video_game_service.list_developers(db)


@router.get(
    "/developers/{developer_name}",
    response_model=List[VideoGameResponse],
    responses=_NOT_FOUND,
    summary="List video games by developer",
    description="Case-insensitive exact match on the developer name.",
)
async def list_by_developer(
    developer_name: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[VideoGameResponse]:
    """
    Example:
        GET /api/videogame/developers/cd%20projekt%20red
    """
    return await video_game_service.list_by_developer(db, developer_name)


@router.get(
    "/publisher",
    response_model=List[Optional[str]],
    summary="List the publisher of every video game",
    description="One entry per record; duplicates and nulls are kept.",
)
async def list_publishers(db: AsyncSession = Depends(get_db_session)) -> List[Optional[str]]:
    return await video_game_service.list_publishers(db)


@router.get(
    "/platform/{platform_name}",
    response_model=List[VideoGameResponse],
    responses=_NOT_FOUND,
    summary="List video games by platform",
    description="Case-insensitive exact match on the platform name.",
)
async def list_by_platform(
    platform_name: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[VideoGameResponse]:
    return await video_game_service.list_by_platform(db, platform_name)


@router.get(
    "/{video_game_id}",
    response_model=VideoGameResponse,
    responses=_NOT_FOUND,
    summary="Get a single video game by id",
)
async def get_video_game(
    video_game_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> VideoGameResponse:
    return await video_game_service.get_video_game(db, video_game_id)


# ══════════════════════════════════════════════════════════════════════════
# Mutations
# ══════════════════════════════════════════════════════════════════════════


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=VideoGameResponse,
    include_in_schema=False,
)
@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=VideoGameResponse,
    responses={400: {"description": "Missing request body", "model": ErrorResponse}},
    summary="Create a video game",
    description="The id is assigned by the database; an id in the body is ignored.",
)
async def create_video_game(
    request: Request,
    response: Response,
    payload: Optional[VideoGameCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> VideoGameResponse:
    """
    Create a record and point the client at it.

    The body is declared optional so an empty request reaches the service,
    which answers 400 rather than the framework's 422.
    """
    created = await video_game_service.create_video_game(db, payload)
    response.headers["Location"] = str(
        request.url_for("get_video_game", video_game_id=created.id)
    )
    return created


@router.put(
    "/{video_game_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Replace the fields of a video game",
    description=(
        "The body id must equal the path id. Title, platform, developer and "
        "publisher are all overwritten; omitted fields become null."
    ),
)
async def update_video_game(
    video_game_id: int,
    payload: Optional[VideoGameUpdate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await video_game_service.update_video_game(db, video_game_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{video_game_id}",
    response_model=VideoGameResponse,
    responses=_NOT_FOUND,
    summary="Delete a video game",
    description="Returns the record as it was before deletion.",
)
async def delete_video_game(
    video_game_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> VideoGameResponse:
    return await video_game_service.delete_video_game(db, video_game_id)
