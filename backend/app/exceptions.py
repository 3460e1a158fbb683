"""Error categories raised by the services and rendered by ``app.main``."""

from fastapi import status


class QueueServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RequestValidationFailed(QueueServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UpstreamError(QueueServiceError):
    """The OAuth provider rejected a call or answered with something unusable."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "OAuth provider request failed"


class AuthorizationDenied(QueueServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Cannot access"


class ConflictError(QueueServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflicting update, please retry"


class PersistenceError(QueueServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database operation failed"


class TokenSigningError(QueueServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to generate JWT token"
