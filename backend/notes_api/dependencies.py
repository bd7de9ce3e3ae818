"""
Notes API — Request Dependencies
=================================

What:  FastAPI dependencies shared by route handlers.
Why:   Handlers receive the store through Depends() instead of importing a
       module-level global, so tests can build apps around their own stores
       or override the dependency entirely.
"""

from fastapi import Request

from notes_api.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """Return the NoteStore that create_app() attached to the application."""
    return request.app.state.note_store
