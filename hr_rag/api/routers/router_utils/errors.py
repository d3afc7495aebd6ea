"""
Domain error to HTTP mapping.

Dependencies: fastapi, hr_rag.core.exceptions
System role: Consistent status codes across routers
"""

from fastapi import HTTPException

from hr_rag.core.exceptions import (
    DocumentNotFoundError,
    HRAssistantException,
    OrganizationNotFoundError,
    ProcessingConflictError,
    RetrievalError,
    UnsupportedFileTypeError,
    ValidationError,
)

_STATUS_CODES: tuple[tuple[type[HRAssistantException], int], ...] = (
    (ValidationError, 400),
    (UnsupportedFileTypeError, 400),
    (DocumentNotFoundError, 404),
    (OrganizationNotFoundError, 404),
    (ProcessingConflictError, 409),
    (RetrievalError, 502),
)


def to_http_exception(error: HRAssistantException) -> HTTPException:
    """Translate a domain exception into an HTTPException (500 when unmapped)."""
    for error_type, status_code in _STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=500, detail=error.message)
