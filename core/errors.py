"""Exception hierarchy for the media range server.

Every failure raised by the core derives from `MediaServerError`, so the HTTP
layer can map them to responses in one place. None of them are retried.
"""


class MediaServerError(Exception):
    """Base exception for all media server errors."""
    def __init__(self, message: str, original_error: Exception | None = None, context: dict | None = None):
        super().__init__(message)
        self.original_error = original_error
        self.context = context or {}

class ResourceUnavailableError(MediaServerError):
    """Raised when the media file cannot be opened or its size cannot be read."""

    @property
    def is_missing(self) -> bool:
        """True when the underlying cause is a missing file."""
        return isinstance(self.original_error, FileNotFoundError)

class ReadFailureError(MediaServerError):
    """Raised when reading or seeking fails after streaming has started."""
    pass

class RangeNotSatisfiableError(MediaServerError):
    """Raised when a requested byte range lies outside the resource."""
    def __init__(self, message: str, resource_size: int, context: dict | None = None):
        super().__init__(message, context=context)
        self.resource_size = resource_size
