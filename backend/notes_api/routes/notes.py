"""
Notes API — Notes Route Handlers
=================================

What:  CRUD endpoints for notes under /notes.
How:   Checks field presence, delegates to the injected NoteStore, and wraps
       the result in a status envelope. Store failures (NotFoundError,
       DuplicateTitleError) propagate to the global handlers in main.py.

Route Inventory:
    GET    /notes        list all notes (insertion order)
    GET    /notes/{id}   single note
    POST   /notes        create (201)
    PUT    /notes/{id}   partial update
    DELETE /notes/{id}   delete, returns the removed note
"""

from fastapi import APIRouter, Depends

from notes_api.dependencies import get_note_store
from notes_api.exceptions import NotFoundError, ValidationFailedError
from notes_api.schemas.note import (
    ErrorEnvelope,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteUpdate,
    Status,
)
from notes_api.services.note_store import NoteStore
from notes_api.status_codes import StatusCodes

router = APIRouter(prefix="/notes", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorEnvelope}}
_BAD_REQUEST = {400: {"description": "Missing fields or duplicate title", "model": ErrorEnvelope}}


def _parse_note_id(raw_id: str) -> int:
    """
    Only plain ASCII digit strings can name a note; anything else (signs,
    underscores, non-ASCII digits) is a 404, not a validation error.
    """
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise NotFoundError(resource="note", resource_id=raw_id)
    return int(raw_id)


def _envelope(note, status: StatusCodes = StatusCodes.SUCCESS) -> NoteEnvelope:
    return NoteEnvelope(status=Status.of(status), data=NoteResponse.model_validate(note))


@router.get("", response_model=NoteListEnvelope, summary="List all notes")
async def list_notes(store: NoteStore = Depends(get_note_store)) -> NoteListEnvelope:
    notes = store.list_notes()
    return NoteListEnvelope(
        status=Status.of(StatusCodes.SUCCESS),
        data=[NoteResponse.model_validate(note) for note in notes],
    )


@router.get(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses=_NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> NoteEnvelope:
    return _envelope(store.get_note(_parse_note_id(note_id)))


@router.post(
    "",
    status_code=201,
    response_model=NoteEnvelope,
    responses=_BAD_REQUEST,
    summary="Create a note",
    description="Title and body are both required. Titles must be unique across all notes.",
)
async def create_note(
    payload: NoteCreate,
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    errors = payload.validation_errors()
    if errors:
        raise ValidationFailedError(errors)

    note = store.create_note(payload.title, payload.body)
    return _envelope(note, StatusCodes.CREATED)


@router.put(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Update a note's title and/or body",
    description=(
        "Fields that are omitted, null or empty are left unchanged. "
        "At least one of title or body must be supplied."
    ),
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    errors = payload.validation_errors()
    if errors:
        raise ValidationFailedError(errors)

    note = store.update_note(_parse_note_id(note_id), **payload.changes())
    return _envelope(note)


@router.delete(
    "/{note_id}",
    response_model=NoteEnvelope,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> NoteEnvelope:
    return _envelope(store.delete_note(_parse_note_id(note_id)))
