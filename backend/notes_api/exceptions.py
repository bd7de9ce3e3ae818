"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Typed failures raised by the note store and the request validators.
Why:   Each failure maps to exactly one status envelope; nothing the client
       sees is derived from an arbitrary exception's text.
How:   Each exception class carries a user-safe message and an optional
       context dict. Global exception handlers (registered in main.py) catch
       these and return the matching envelope.

Exception Hierarchy:
    NotesError (base)
    ├── ValidationFailedError   → 400 Bad Request (errors array)
    ├── DuplicateTitleError     → 400 Bad Request (fixed message)
    └── NotFoundError           → 404 Not Found

Anything outside this hierarchy is treated as unexpected and reported as
500 Internal Server Error with the details kept in the server log.
"""

from typing import Any, Dict, List, Optional


class NotesError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationFailedError(NotesError):
    """
    Raised when a request body is missing required fields.

    When:    Create without title/body, or update with neither field supplied.
    HTTP:    400 Bad Request

    Example response:
        {
            "status": {"code": 400, "message": "Bad Request"},
            "errors": [{"field": "title", "message": "Title is required"}]
        }
    """

    def __init__(
        self,
        errors: List[Dict[str, str]],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = errors
        message = "; ".join(error["message"] for error in errors) or "Validation failed"
        super().__init__(message=message, context=context)


class DuplicateTitleError(NotesError):
    """
    Raised when a create or update would give two live notes the same title.

    The store is left untouched when this is raised.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        title: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["title"] = title
        super().__init__(message="Title already exists", context=ctx)
        self.title = title


class NotFoundError(NotesError):
    """
    Raised when no live note has the requested ID.

    When:    GET/PUT/DELETE /notes/{id} with an unknown or malformed ID.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
