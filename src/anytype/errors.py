"""
Exception hierarchy for the Anytype client.
"""


class AnytypeError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(AnytypeError):
    """Raised for malformed input, e.g. unparsable properties JSON."""


class AuthError(AnytypeError):
    """Raised when no credential is available."""


class DeserializationError(AnytypeError):
    """Raised when a response body does not match the expected shape."""


class TransportError(AnytypeError):
    """Raised when an HTTP call fails or returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.path = path


class NotFoundError(TransportError):
    pass


class UnauthorizedError(TransportError, AuthError):
    pass


class InvalidRequestError(TransportError, ValidationError):
    """The service rejected the request body (400/422)."""
