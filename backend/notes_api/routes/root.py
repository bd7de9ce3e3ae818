"""
Notes API — Root Route
=======================

GET / answers with a plain-text greeting so a browser or curl can confirm
the service is up without knowing any other path.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

GREETING = "Hello, this is your REST API!"


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return GREETING
