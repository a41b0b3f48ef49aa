"""
Domain exceptions for the canvas backend.

Each exception carries a user-facing (localized) message and the HTTP status
code the route layer should answer with.
"""

from canvas_app import messages


class CanvasError(Exception):
    """Base class for every error raised by the canvas backend."""
    default_message = messages.INTERNAL_ERROR
    default_status = 500

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status
        super().__init__(self.message)

    def to_dict(self):
        return {"success": False, "message": self.message}


class AuthError(CanvasError):
    """Missing or wrong access key."""
    default_message = messages.UNAUTHORIZED
    default_status = 401


class NotFoundError(CanvasError):
    """The singleton canvas row is missing."""
    default_message = messages.RECORD_NOT_FOUND
    default_status = 404


class StorageError(CanvasError):
    """Schema creation, seeding, read or write failed at the database layer."""
    default_message = messages.STORAGE_INIT_FAILED
    default_status = 500
