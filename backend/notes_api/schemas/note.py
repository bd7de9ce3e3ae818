"""
Notes API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract of the notes endpoints.
Why:   Input parsing, response serialization, and OpenAPI doc generation.
How:   FastAPI parses request bodies into the request models and serializes
       the envelope models returned by route handlers.

Design Decision:
    Request fields are all Optional at the schema level. Presence rules
    ("title and body required on create", "at least one on update") are
    checked by the models' `validation_errors()` so that a missing field is
    reported with the service's own messages and a 400, rather than
    FastAPI's generic 422.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from notes_api.status_codes import StatusCodes


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /notes. Both fields must be non-empty."""
    title: Optional[str] = Field(default=None, description="Unique note title")
    body: Optional[str] = Field(default=None, description="Note content")

    def validation_errors(self) -> List[Dict[str, str]]:
        errors = []
        if not self.title:
            errors.append({"field": "title", "message": "Title is required"})
        if not self.body:
            errors.append({"field": "body", "message": "Body is required"})
        return errors


class NoteUpdate(BaseModel):
    """
    Body of PUT /notes/{id}.

    A falsy value (missing, null or "") means "not supplied": it never
    overwrites the stored field. `changes()` normalizes such values to None
    so the store only ever sees an explicit presence flag.
    """
    title: Optional[str] = Field(default=None, description="Replacement title")
    body: Optional[str] = Field(default=None, description="Replacement body")

    def validation_errors(self) -> List[Dict[str, str]]:
        if not self.title and not self.body:
            # "body" = the request body as a whole, as for unparseable bodies in main.py
            return [{
                "field": "body",
                "message": "At least one of title or body must be provided for update",
            }]
        return []

    def changes(self) -> Dict[str, Optional[str]]:
        return {"title": self.title or None, "body": self.body or None}


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class Status(BaseModel):
    """The `{code, message}` pair attached to every response."""
    code: int
    message: str

    @classmethod
    def of(cls, status: StatusCodes) -> "Status":
        return cls(code=status.code, message=status.message)


class NoteResponse(BaseModel):
    id: int = Field(description="Note identifier, assigned sequentially from 1")
    title: str = Field(description="Note title (unique)")
    body: str = Field(description="Note content")

    model_config = {"from_attributes": True}


class NoteEnvelope(BaseModel):
    """Envelope for single-note responses (get, create, update, delete)."""
    status: Status
    data: NoteResponse


class NoteListEnvelope(BaseModel):
    """Envelope for GET /notes, notes in insertion order."""
    status: Status
    data: List[NoteResponse]


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — documented in OpenAPI, built by the handlers in main.py
# ══════════════════════════════════════════════════════════════════════════


class FieldError(BaseModel):
    field: str
    message: str


class ErrorEnvelope(BaseModel):
    """
    Failure envelope. `errors` is set for validation failures, `message`
    for duplicate titles; not-found and server errors carry only `status`.
    """
    status: Status
    errors: Optional[List[FieldError]] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Liveness probe payload returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
