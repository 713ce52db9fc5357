"""Error taxonomy for the authentication flow. Each error carries its HTTP status."""

from fastapi import status


class AuthServiceError(Exception):
    """Base class for errors translated to a JSON ``{"error": message}`` response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(AuthServiceError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AuthServiceError):
    """Username or email already registered."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AuthServiceError):
    """Bad credentials, or a missing, malformed or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AuthServiceError):
    """Referenced entity does not exist (or the route is disabled)."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(AuthServiceError):
    """Persistence-layer failure. The message is never shown to callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
