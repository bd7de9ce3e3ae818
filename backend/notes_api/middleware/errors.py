"""
Notes API — Unexpected Error Middleware
========================================

What:  Turns any exception that escapes a route handler into the
       INTERNAL_SERVER_ERROR envelope.
When:  Innermost user middleware, so the 500 response still passes back
       through CORS, access logging and the request-ID layer, and nothing is
       re-raised to the server.

NotesError subclasses never reach this point: the exception handlers
registered in main.py render them first. The exception text is logged with
its traceback and never returned to the client.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notes_api.middleware.request_id import request_id_var
from notes_api.status_codes import StatusCodes

logger = logging.getLogger(__name__)


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """Catches everything the route layer did not handle and answers 500."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error: %s",
                request_id_var.get(""),
                str(exc),
                exc_info=True,
            )
            status = StatusCodes.INTERNAL_SERVER_ERROR
            return JSONResponse(status_code=status.code, content={"status": status.as_dict()})
