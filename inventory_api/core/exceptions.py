"""Error taxonomy for the resource handlers.

Each error carries the HTTP status and the client-facing message; the
application renders them as ``{"message": ...}`` bodies.
"""

from fastapi import status


class InventoryError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(InventoryError):
    """Raised when no row matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidPayloadError(InventoryError):
    """Raised when client-supplied data cannot be stored."""

    status_code = status.HTTP_400_BAD_REQUEST


class PersistenceError(InventoryError):
    """Raised when the database layer fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
