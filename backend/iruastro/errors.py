"""
Error types surfaced by the API.

Every exception carries the HTTP status and the machine-readable code that the
error handlers in ``create_app`` render as::

    {"message": ..., "error": {"code": ..., "message": ..., "details": ...}}
"""

from typing import Any, Dict, List, Optional


class IruAstroError(Exception):
    """Base class for errors rendered as JSON error responses."""

    status_code = 500
    code = "INTERNAL_ERROR"
    message_key = "internalError"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(IruAstroError):
    """Missing or malformed request input. ``errors`` itemizes each problem."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message_key = "validationError"

    def __init__(self, errors: List[str], message: str = "Validation errors"):
        super().__init__(message, details={"errors": list(errors)})
        self.errors = list(errors)


class InvalidDateTime(ValidationError):
    message_key = "invalidDateTime"

    def __init__(self, message: str):
        super().__init__([message], message="Invalid date or time format")


class InvalidRange(ValidationError):
    code = "INVALID_RANGE"
    message_key = "invalidRange"

    def __init__(self, message: str = "endDate must be after startDate"):
        super().__init__([message], message=message)


class Unauthorized(IruAstroError):
    status_code = 401
    code = "UNAUTHORIZED"
    message_key = "unauthorized"

    def __init__(self, message: str = "Unauthorized access. Please provide a valid Bearer token."):
        super().__init__(message)


class InternalError(IruAstroError):
    """Unexpected computation fault. ``kind`` names the underlying exception type."""

    def __init__(self, message: str, kind: str = "InternalError"):
        super().__init__(message, details={"kind": kind})
        self.kind = kind

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        return cls(str(exc) or "An unexpected error occurred", kind=type(exc).__name__)
