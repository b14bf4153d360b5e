"""
VideoGame API - Request ID Middleware
=======================================

What:  Tags every request with a correlation id and echoes it in the response.
How:   Uses the client's X-Request-ID header when present, otherwise a fresh
       8-character id from uuid4. The id is stored in a ContextVar (read by
       the access logger and the exception handlers) and on request.state.
When:  Outermost custom middleware, so every later log line can see the id.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request id and adds it to the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        # Not reset afterwards: the catch-all 500 handler runs outside this
        # middleware and still reads the id
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
