"""
Notes API — NoteStore Unit Tests
=================================

What we test:
    ✅ Sequential IDs, never reused after delete
    ✅ Duplicate titles rejected without touching the store
    ✅ Partial updates and duplicate self-exclusion
    ✅ Delete returns the removed note and frees its title
    ✅ Callers receive copies, not the stored objects
    ✅ Concurrent creates of one title: exactly one wins
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from notes_api.exceptions import DuplicateTitleError, NotFoundError
from notes_api.models.note import Note
from notes_api.services.note_store import NoteStore


class TestNoteStoreCreate:
    """Tests for create_note and ID assignment."""

    def setup_method(self):
        self.store = NoteStore()

    def test_ids_start_at_one_and_increase(self):
        first = self.store.create_note("A", "b1")
        second = self.store.create_note("B", "b2")

        assert first == Note(id=1, title="A", body="b1")
        assert second.id == 2

    def test_duplicate_title_rejected_and_store_unchanged(self):
        self.store.create_note("A", "b1")

        with pytest.raises(DuplicateTitleError) as exc_info:
            self.store.create_note("A", "b2")

        assert exc_info.value.message == "Title already exists"
        assert self.store.list_notes() == [Note(id=1, title="A", body="b1")]

    def test_rejected_create_does_not_consume_an_id(self):
        self.store.create_note("A", "b1")
        with pytest.raises(DuplicateTitleError):
            self.store.create_note("A", "b2")

        assert self.store.create_note("B", "b2").id == 2

    def test_title_comparison_is_exact(self):
        self.store.create_note("Title", "b")

        assert self.store.create_note("title", "b").id == 2
        assert self.store.create_note("Title ", "b").id == 3

    def test_ids_not_reused_after_delete(self):
        self.store.create_note("A", "b")
        self.store.create_note("B", "b")
        self.store.delete_note(2)

        assert self.store.create_note("C", "b").id == 3


class TestNoteStoreRead:
    """Tests for list_notes and get_note."""

    def setup_method(self):
        self.store = NoteStore()

    def test_list_empty(self):
        assert self.store.list_notes() == []
        assert len(self.store) == 0

    def test_list_keeps_insertion_order(self):
        for title in ("c", "a", "b"):
            self.store.create_note(title, "body")

        assert [note.title for note in self.store.list_notes()] == ["c", "a", "b"]

    def test_get_missing_raises_not_found(self):
        with pytest.raises(NotFoundError):
            self.store.get_note(42)

    def test_returned_notes_are_copies(self):
        created = self.store.create_note("A", "b")
        created.title = "mutated"
        self.store.get_note(1).body = "mutated"

        assert self.store.get_note(1) == Note(id=1, title="A", body="b")


class TestNoteStoreUpdate:
    """Tests for update_note partial-update semantics."""

    def setup_method(self):
        self.store = NoteStore()
        self.store.create_note("A", "b1")
        self.store.create_note("B", "b2")

    def test_title_only_keeps_body(self):
        note = self.store.update_note(1, title="A2")

        assert note == Note(id=1, title="A2", body="b1")

    def test_body_only_keeps_title(self):
        note = self.store.update_note(1, body="x")

        assert note == Note(id=1, title="A", body="x")

    def test_title_taken_by_other_note_rejected(self):
        with pytest.raises(DuplicateTitleError):
            self.store.update_note(1, title="B", body="new body")

        # Neither field changed
        assert self.store.get_note(1) == Note(id=1, title="A", body="b1")

    def test_update_to_own_title_succeeds(self):
        note = self.store.update_note(1, title="A", body="b1")

        assert note == Note(id=1, title="A", body="b1")

    def test_old_title_is_freed_after_rename(self):
        self.store.update_note(1, title="Renamed")

        assert self.store.create_note("A", "b3").id == 3

    def test_missing_note_raises_not_found(self):
        with pytest.raises(NotFoundError):
            self.store.update_note(99, body="x")


class TestNoteStoreDelete:
    """Tests for delete_note."""

    def setup_method(self):
        self.store = NoteStore()
        self.store.create_note("A", "b1")

    def test_delete_returns_removed_note(self):
        removed = self.store.delete_note(1)

        assert removed == Note(id=1, title="A", body="b1")
        with pytest.raises(NotFoundError):
            self.store.get_note(1)

    def test_delete_frees_title(self):
        self.store.delete_note(1)

        assert self.store.create_note("A", "again").id == 2

    def test_delete_missing_raises_not_found(self):
        self.store.delete_note(1)

        with pytest.raises(NotFoundError):
            self.store.delete_note(1)


class TestNoteStoreConcurrency:
    """Writers racing on the same store."""

    def test_concurrent_creates_of_one_title(self):
        store = NoteStore()
        barrier = threading.Barrier(16)

        def attempt(i):
            barrier.wait()
            try:
                return store.create_note("same", f"body {i}")
            except DuplicateTitleError:
                return None

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(attempt, range(16)))

        winners = [note for note in results if note is not None]
        assert len(winners) == 1
        assert len(store) == 1

    def test_concurrent_creates_get_distinct_ids(self):
        store = NoteStore()

        with ThreadPoolExecutor(max_workers=8) as pool:
            notes = list(pool.map(lambda i: store.create_note(f"t{i}", "b"), range(100)))

        assert sorted(note.id for note in notes) == list(range(1, 101))
