"""Exceptions raised by the access-control core."""


class EventAccessError(Exception):
    """Base exception for the event access service."""

    message = "Access error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCodeError(EventAccessError):
    """Raised when no access code was supplied."""

    message = "Access code is required"


class InvalidCodeError(EventAccessError):
    """Raised when the access code is not on the guest list."""

    message = "Invalid access code"


class AuthenticationError(EventAccessError):
    """Raised when a request cannot be tied to a live session."""

    error = "Unauthorized"


class MissingTokenError(AuthenticationError):
    message = "No authentication token provided"


class InvalidTokenError(AuthenticationError):
    message = "Invalid or expired token"


class ExpiredTokenError(AuthenticationError):
    message = "Session expired. Please login again."
