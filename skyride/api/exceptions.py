"""API exception hierarchy for consistent error handling.

All API exceptions inherit from SkyRideAPIError, whose status_code and
error_code drive the global exception handler.
"""

from skyride.api.models.errors import ErrorCode


class SkyRideAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(SkyRideAPIError):
    """Raised when request validation fails."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class SessionNotFoundError(SkyRideAPIError):
    """Raised when a conversation has no stored state."""

    status_code = 404
    error_code = ErrorCode.SESSION_NOT_FOUND
