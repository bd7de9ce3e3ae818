"""
Notes API — Note Domain Entity
===============================

What:  The record held by the NoteStore: an integer ID, a title and a body.
Why:   A plain dataclass keeps the store free of any persistence or HTTP
       concerns; Pydantic schemas read it via `from_attributes`.

Invariants (enforced by NoteStore, not by this class):
    - id is positive and never reused after a delete
    - title is unique among live notes (exact, case-sensitive match)
    - body is never empty
"""

from dataclasses import dataclass


@dataclass
class Note:
    id: int
    title: str
    body: str
