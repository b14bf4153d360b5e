"""
VideoGame API - Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the error cases the API reports.
How:   Each exception carries a user-facing message, an optional context
       dict, and the machine-readable `error_code` used in the response body.
       Global exception handlers (registered in main.py) translate them into
       structured JSON responses with the matching HTTP status code.
Who:   Raised by the service layer; caught by the handlers in main.py.

Exception Hierarchy:
    VideoGameApiError (base)     → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (missing/malformed body)
    │   └── IdMismatchError      → 400 Bad Request (path id != payload id)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class VideoGameApiError(Exception):
    """
    Base exception for all VideoGame API errors.

    Attributes:
        message:     User-facing error description (safe to return in API response)
        context:     Additional debug info
        error_code:  Machine-readable code placed in the `error` field of the response
        status_code: HTTP status the global handler answers with
    """

    error_code = "internal_error"
    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(VideoGameApiError):
    """
    Raised when the client request cannot be processed as sent.

    When:    The request body is absent or null, or the framework rejected it.
    HTTP:    400 Bad Request
    """

    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class IdMismatchError(ValidationError):
    """
    Raised when an update payload names a different record than the URL.

    When:    PUT /api/videogame/{id} whose body `id` differs from `{id}`.
             Checked before any storage access, so it wins over "not found".
    HTTP:    400 Bad Request
    """

    error_code = "id_mismatch"

    def __init__(
        self,
        path_id: int,
        payload_id: Optional[int],
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path_id"] = path_id
        ctx["payload_id"] = payload_id
        super().__init__(
            message=f"Payload id '{payload_id}' does not match path id '{path_id}'",
            field="id",
            context=ctx,
        )
        self.path_id = path_id
        self.payload_id = payload_id


class NotFoundError(VideoGameApiError):
    """
    Raised when a requested resource does not exist.

    When:    Lookup, update, or delete by an id that has no row, or a
             developer/platform filter that matches nothing.
    HTTP:    404 Not Found

    SQLAlchemy returns None (or an empty list) for missing records; the
    service layer converts that into this exception.
    """

    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(VideoGameApiError):
    """
    Raised when a storage call fails unexpectedly.

    When:    Connection lost, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The response message is always generic. The original error type is kept
    in `context` and logged server-side only.
    """

    error_code = "server_error"
    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
