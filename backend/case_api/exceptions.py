"""
Case API: Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the error scenarios the API surfaces.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    CaseApiError (base)          → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── DatabaseError            → 500 Internal Server Error

There is deliberately no NotFoundError: looking up or deleting a missing
case is a successful call with an empty body.
"""

from typing import Any, Dict, Optional


class CaseApiError(Exception):
    """
    Base exception for all Case API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CaseApiError):
    """
    Raised when client input fails validation.

    When:    Absent request body, missing caseNumber, missing or empty title,
             or a request FastAPI could not parse.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "caseNumber is required",
            "details": {"field": "caseNumber"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(CaseApiError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the context is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
