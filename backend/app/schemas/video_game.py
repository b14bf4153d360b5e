"""
VideoGame API - Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and generates the OpenAPI document from them.

Schemas are separate from the SQLAlchemy model so the request shapes can
differ from the row: creates never carry an id, updates may.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What clients send
# ══════════════════════════════════════════════════════════════════════════


class VideoGameFields(BaseModel):
    """The four free-text catalog fields shared by every VideoGame shape."""
    title: Optional[str] = Field(default=None, description="Game title")
    platform: Optional[str] = Field(default=None, description="Platform, e.g. PS5, PC")
    developer: Optional[str] = Field(default=None, description="Developing studio")
    publisher: Optional[str] = Field(default=None, description="Publishing company")


class VideoGameCreate(VideoGameFields):
    """
    What:  Body of POST /api/videogame.
    How:   An `id` sent by the client is not a declared field and is dropped;
           the database assigns the id.
    """


class VideoGameUpdate(VideoGameFields):
    """
    What:  Body of PUT /api/videogame/{id}.
    How:   `id` must equal the path id. The four text fields overwrite the
           stored row unconditionally, so omitted fields are stored as null.
    """
    id: Optional[int] = Field(default=None, description="Must match the id in the URL")

    def to_values(self) -> dict:
        """Column values written by the UPDATE statement (id excluded)."""
        return self.model_dump(include={"title", "platform", "developer", "publisher"})


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns
# ══════════════════════════════════════════════════════════════════════════


class VideoGameResponse(VideoGameFields):
    """
    What:  Full representation of a stored record.
    Who:   Returned by every endpoint that yields records.
    """
    id: int = Field(description="Identifier assigned by the database")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "id_mismatch",
            "message": "Payload id '5' does not match path id '4'",
            "details": {"field": "id", "path_id": 4, "payload_id": 5},
            "request_id": "3f9c1a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
