"""
Notes API — Test Configuration (conftest.py)
=============================================

Shared pytest fixtures.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── note_store:      empty NoteStore
    ├── app:             FastAPI app built around note_store
    └── test_client:     HTTPX AsyncClient for endpoint tests
"""

import os

# Override settings BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notes_api.main import create_app
from notes_api.services.note_store import NoteStore


@pytest.fixture
def note_store():
    return NoteStore()


@pytest.fixture
def app(note_store):
    return create_app(note_store=note_store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app through ASGITransport (no server).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

