"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       wired to one NoteStore.
Who:   Called by uvicorn (uvicorn notes_api.main:app) or the `notes-api`
       console script (run()).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS → Errors  │
    │                                                     │
    │  Routes:      GET /   /notes CRUD   GET /health     │
    │                                                     │
    │  Exception Handlers:                                │
    │  ValidationFailed→400 │ DuplicateTitle→400          │
    │  NotFound→404         │ anything else→500           │
    │                                                     │
    │  State:       app.state.note_store (NoteStore)      │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_api import __version__
from notes_api.config import settings
from notes_api.exceptions import DuplicateTitleError, NotFoundError, ValidationFailedError
from notes_api.middleware.errors import UnexpectedErrorMiddleware
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from notes_api.routes import health, notes, root
from notes_api.services.note_store import NoteStore
from notes_api.status_codes import StatusCodes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once from the lifespan before anything else logs.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Notes API %s starting on port %d", __version__, settings.port)

    yield

    # Nothing to flush: notes are in memory and are discarded with the process
    logger.info("Notes API shutting down (%d notes discarded)", len(app.state.note_store))


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status: StatusCodes, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status.code,
        content={"status": status.as_dict(), **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every failure to a status envelope.

    Handler hierarchy:
        ValidationFailedError   → 400 with errors array
        RequestValidationError  → 400 with errors array (unparseable body)
        DuplicateTitleError     → 400 with fixed message
        NotFoundError           → 404

    Anything else is rendered as 500 by UnexpectedErrorMiddleware, which
    sits inside the request-ID and CORS layers.
    """

    @app.exception_handler(ValidationFailedError)
    async def handle_validation_failed(request: Request, exc: ValidationFailedError):
        logger.warning("[%s] Validation failed: %s", request_id_var.get(""), exc.message)
        return _error_response(StatusCodes.BAD_REQUEST, errors=exc.errors)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            errors.append({"field": ".".join(loc) or "body", "message": error.get("msg", "")})
        logger.warning("[%s] Malformed request body: %s", request_id_var.get(""), errors)
        return _error_response(StatusCodes.BAD_REQUEST, errors=errors)

    @app.exception_handler(DuplicateTitleError)
    async def handle_duplicate_title(request: Request, exc: DuplicateTitleError):
        return _error_response(StatusCodes.BAD_REQUEST, message=exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(StatusCodes.NOT_FOUND)



# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(note_store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        note_store: Store to serve. A fresh, empty NoteStore when omitted.
    """
    app = FastAPI(
        title="Notes API",
        description="CRUD service for notes (title + body) kept in memory.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.note_store = note_store if note_store is not None else NoteStore()

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → UnexpectedError → routes
    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(root.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app on settings.host:settings.port."""
    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
