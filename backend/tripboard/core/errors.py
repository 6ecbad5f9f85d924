"""
Domain exceptions raised by the service layer.

Each exception carries a machine-readable code and the HTTP status the
request boundary should answer with. Handlers in ``tripboard.main`` turn
them into ``{"error": ..., "code": ...}`` responses.
"""
from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to clients."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMAIL_EXISTS = "EMAIL_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TripboardError(Exception):
    """Base exception for all Tripboard errors."""

    status_code = 500
    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ValidationError(TripboardError):
    """Malformed or missing input."""

    status_code = 400
    default_code = ErrorCode.VALIDATION_ERROR


class EmailAlreadyExistsError(TripboardError):
    """Signup with an email that is already registered."""

    status_code = 400
    default_code = ErrorCode.EMAIL_EXISTS

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


class InvalidCredentialsError(TripboardError):
    """Unknown email or wrong password. The two cases are not distinguished."""

    status_code = 401
    default_code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class UnauthorizedError(TripboardError):
    """No valid session."""

    status_code = 401
    default_code = ErrorCode.UNAUTHORIZED

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(TripboardError):
    """Resource exists but belongs to another user."""

    status_code = 403
    default_code = ErrorCode.FORBIDDEN


class NotFoundError(TripboardError):
    status_code = 404
    default_code = ErrorCode.NOT_FOUND
