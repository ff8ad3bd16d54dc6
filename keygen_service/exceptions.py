"""
HTTP-facing exceptions.
Rendered by the application's exception handler as JSON error bodies.
"""
from typing import Any


class AppException(Exception):
    """Base application exception."""
    def __init__(self, code: str, message: str, status_code: int = 500, details: Any = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ServiceUnavailableError(AppException):
    """Raised when a dependency such as the counter store cannot be reached."""
    def __init__(self, message: str = "Connection error"):
        super().__init__(
            code="SERVICE_UNAVAILABLE",
            message=message,
            status_code=503
        )


class NotFoundError(AppException):
    """Raised when resource is not found."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            code="NOT_FOUND",
            message=message,
            status_code=404
        )


class InternalServerError(AppException):
    """Raised for failures with a diagnostic detail."""
    def __init__(self, message: str = "Internal error", details: Any = None):
        super().__init__(
            code="INTERNAL_ERROR",
            message=message,
            status_code=500,
            details=details
        )
