"""Domain errors raised by the access layer.

Each error carries the HTTP status the API layer answers with, so the
exception handlers in ``main.py`` can render any of them as
``{"error": message}`` without knowing the concrete type.
"""
from typing import Optional


class NotesError(Exception):
    """Base exception for all notebook/note/tag errors."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(NotesError):
    """Raised when a required field is missing or a reference is invalid."""

    status_code = 400


class NotFoundError(NotesError):
    """Raised when an update or delete matches no row."""

    status_code = 404


class ConflictError(NotesError):
    """Raised when a uniqueness constraint is violated (duplicate tag name)."""

    status_code = 400
