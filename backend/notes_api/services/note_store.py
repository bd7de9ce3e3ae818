"""
Notes API — Note Store
=======================

What:  In-memory owner of every note: ID assignment, title uniqueness,
       partial updates, and deletion.
Why:   It is the only component that mutates note state, so every invariant
       is enforced in one place.
How:   An insertion-ordered dict keyed by ID, a next-ID counter, and a single
       lock around every operation.
Who:   Constructed once by create_app() and injected into route handlers.

Invariants:
    - No two live notes share a title (exact, case-sensitive comparison).
    - IDs come from one counter that only moves forward; a deleted ID is
      never issued again.

Concurrency:
    Handlers may run on the event loop or in the threadpool. Reads and writes
    all take the same lock and callers only ever receive copies, so the
    duplicate check and the insert/update it guards are one atomic step and
    no reader sees a half-applied update.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from notes_api.exceptions import DuplicateTitleError, NotFoundError
from notes_api.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Thread-safe in-memory note collection.

    Responsibilities:
        - list_notes():  all notes, insertion order
        - get_note():    single note or NotFoundError
        - create_note(): assign ID, reject duplicate titles
        - update_note(): partial update, duplicate check excludes the note itself
        - delete_note(): permanent removal, returns the removed note
    """

    def __init__(self) -> None:
        self._notes: Dict[int, Note] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def list_notes(self) -> List[Note]:
        with self._lock:
            return [replace(note) for note in self._notes.values()]

    def get_note(self, note_id: int) -> Note:
        with self._lock:
            return replace(self._require(note_id))

    def create_note(self, title: str, body: str) -> Note:
        """
        Append a new note with the next sequential ID.

        Raises:
            DuplicateTitleError: another live note already has this title;
                                 nothing is stored and no ID is consumed.
        """
        with self._lock:
            self._ensure_title_free(title)

            note = Note(id=self._next_id, title=title, body=body)
            self._next_id += 1
            self._notes[note.id] = note
            logger.info("Note %d created", note.id)
            return replace(note)

    def update_note(
        self,
        note_id: int,
        title: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Note:
        """
        Replace the supplied fields of an existing note.

        None means "not supplied" and leaves that field as it is. A new title
        may equal the note's own current title.

        Raises:
            NotFoundError:       no live note has this ID
            DuplicateTitleError: a different note already has the new title;
                                 the note is left unchanged
        """
        with self._lock:
            note = self._require(note_id)
            if title is not None:
                self._ensure_title_free(title, exclude_id=note_id)
                note.title = title
            if body is not None:
                note.body = body
            logger.info("Note %d updated", note_id)
            return replace(note)

    def delete_note(self, note_id: int) -> Note:
        """Remove a note for good and return its last value."""
        with self._lock:
            self._require(note_id)
            note = self._notes.pop(note_id)
            logger.info("Note %d deleted", note_id)
            return note

    # ── Helpers (caller holds the lock) ───────────────────────────────────

    def _require(self, note_id: int) -> Note:
        note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return note

    def _ensure_title_free(self, title: str, exclude_id: Optional[int] = None) -> None:
        for note in self._notes.values():
            if note.title == title and note.id != exclude_id:
                logger.warning("Rejected duplicate title (already used by note %d)", note.id)
                raise DuplicateTitleError(title, context={"existing_id": note.id})
