"""
Exception hierarchy for the API.

Every application error carries the HTTP status it maps to and a
message that is safe to return to clients.  ``create_app`` registers
a handler that turns these into ``{"detail": message}`` responses,
matching the shape FastAPI uses for ``HTTPException``.
"""

from fastapi import status


class CarrerasAPIError(Exception):
    """Base exception for all application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(CarrerasAPIError):
    """Required configuration is missing.  Fatal at startup."""


class ValidationError(CarrerasAPIError):
    """The request body is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CarrerasAPIError):
    """A referenced career or subject does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(CarrerasAPIError):
    """Communication with the key-value store failed.

    The message is generic; the underlying client exception is kept as
    ``__cause__`` and logged, never sent to the client.
    """
