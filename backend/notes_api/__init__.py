"""
Notes API — Application Package Initializer
============================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables module imports like `from notes_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service follows a small layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        NoteStore (Core Service)     │  ← IDs, title uniqueness, updates
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note dataclass + Pydantic
    └─────────────────────────────────────┘

    Routes validate request bodies and translate store outcomes into status
    envelopes. The store knows nothing about HTTP and is fully in-memory:
    notes live only as long as the process.
"""

__version__ = "1.0.0"
