"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the app factory turns them
into `{"detail": message}` responses.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a client-facing status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class TripNotFoundError(NotFoundError):
    default_message = "Trip not found"


class NoTripsFoundError(NotFoundError):
    default_message = "No trips found for this user"


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidParticipantError(ValidationError):
    """Raised under the "reject" policy when participant ids are malformed."""

    def __init__(self, invalid_ids: list):
        self.invalid_ids = invalid_ids
        super().__init__(f"Invalid participant ids: {', '.join(repr(i) for i in invalid_ids)}")


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied to this trip"
