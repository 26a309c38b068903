from typing import Any, Mapping, Optional


class PantryKeeperError(Exception):
    """Base class for errors that map onto an HTTP outcome.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code, defaults to ``error_code``
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    error_code = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.error_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(PantryKeeperError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    error_code = "INVALID_ARGUMENT"
    default_message = "Invalid input"


class UnauthorizedError(PantryKeeperError):
    """Raised when a request carries no credential or one that fails verification."""

    http_status = 401
    error_code = "UNAUTHENTICATED"
    default_message = "Unauthorized"


class ForbiddenError(PantryKeeperError):
    """Raised when the authenticated principal may not touch the addressed subject."""

    http_status = 403
    error_code = "FORBIDDEN"
    default_message = "Unauthorized access"


class NotFoundError(PantryKeeperError):
    """Raised when a requested resource was not found."""

    http_status = 404
    error_code = "NOT_FOUND"
    default_message = "Not found"


class DependencyUnavailableError(PantryKeeperError):
    """Raised when an optional third-party integration is not configured or not reachable."""

    http_status = 503
    error_code = "DEPENDENCY_UNAVAILABLE"
    default_message = "Service unavailable"


class StoreError(PantryKeeperError):
    """Raised when the document store rejects a read, write or batch commit.

    The message is kept for server-side logs only; handlers render the
    generic internal error text.
    """

    http_status = 500
    error_code = "INTERNAL_SERVER_ERROR"
    default_message = "Document store failure"
