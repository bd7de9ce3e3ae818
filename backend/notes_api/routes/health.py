"""
Notes API — Health Check Route
===============================

What:  Liveness endpoint for monitoring and container health probes.
How:   The service has no external dependencies, so health is reported as
       "healthy" whenever the process can answer; the payload adds the
       current note count and uptime for dashboards.
"""

import time

from fastapi import APIRouter, Depends

from notes_api import __version__
from notes_api.dependencies import get_note_store
from notes_api.schemas.note import HealthResponse
from notes_api.services.note_store import NoteStore

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
