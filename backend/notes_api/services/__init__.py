# Services package init
"""
Notes API — Services Layer
===========================

What:  Business logic sitting between routes (HTTP) and the note data.
Why:   Routes handle HTTP, services handle the rules.

Service Inventory:
    - NoteStore: in-memory note collection (IDs, title uniqueness, updates)
"""
