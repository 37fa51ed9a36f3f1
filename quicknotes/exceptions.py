"""
QuickNotes — Custom Exception Hierarchy
========================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch the server-side
       ones and return JSON error payloads with the matching status code.
Who:   Raised by the note store and the client API wrapper.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError   → 400 Bad Request (missing/empty title or content)
    ├── NotFoundError     → 404 Not Found (unknown note id)
    └── TransportError    → client side only (network failure or non-2xx reply)
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

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


class ValidationError(QuickNotesError):
    """
    Raised when a note's title or content is missing, empty or whitespace-only.

    HTTP:    400 Bad Request

    Example response:
        {"error": "Title and content are required", "request_id": "a1b2c3d4"}
    """

    def __init__(
        self,
        message: str = "Title and content are required",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(QuickNotesError):
    """
    Raised when no note has the requested id.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class TransportError(QuickNotesError):
    """
    Raised by the client when a request could not be completed.

    Covers both network-level failures (status_code is None) and replies
    outside the 2xx range (status_code holds the HTTP status). For the
    latter the server's own error text, when present, is in `server_message`.
    """

    def __init__(
        self,
        message: str = "Request failed",
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
        self.server_message = server_message
