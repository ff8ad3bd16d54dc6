"""
Errors raised by key generators.

Request-time failures collapse into three kinds (connection, not found,
unknown). Configuration failures are separate and only happen while a
generator is being built.
"""


class GeneratorError(Exception):
    """Base class for request-time generator failures."""

    message = "Generator error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class GeneratorConnectionError(GeneratorError):
    """The counter store could not be reached (timeout, refused, dropped)."""

    message = "Connection error"


class GeneratorNotFoundError(GeneratorError):
    """The requested generator or its backing resource is unavailable."""

    message = "Generator not found"


class GeneratorUnknownError(GeneratorError):
    """Any other failure; the detail is kept for diagnostics."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Generator unknown error: {detail}")


class GeneratorConfigurationError(Exception):
    """Raised when a generator cannot be built from the given configuration."""
