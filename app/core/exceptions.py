"""
Application error taxonomy.

Every error raised by services and repositories derives from ``AppError`` and
carries its HTTP status, a stable error code and a client-safe message. The
``ErrorHandlingMiddleware`` is the only place these are turned into responses.

Kinds:
    client  - bad input or a lookup that failed for the caller (4xx)
    auth    - missing, malformed, expired or badly signed token (401)
    server  - datastore failures and anything unexpected (500)
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for all application errors."""

    kind: str = "server"
    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"detail": self.message, "error_code": self.error_code}
        if self.details and self.kind != "server":
            payload["details"] = self.details
        return payload


# --- client errors ---

class ClientError(AppError):
    kind = "client"
    status_code = 400
    error_code = "BAD_REQUEST"
    default_message = "Bad request"


class DuplicateUserError(ClientError):
    error_code = "DUPLICATE_USER"
    default_message = "User already exists"


class InvalidCredentialsError(ClientError):
    error_code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class UserNotFoundError(ClientError):
    error_code = "USER_NOT_FOUND"
    default_message = "User not found"


class ProfileNotFoundError(UserNotFoundError):
    """The token is valid but its user no longer exists."""
    status_code = 404


class IncorrectAnswerError(ClientError):
    error_code = "INCORRECT_ANSWER"
    default_message = "Incorrect security answer"


class ValidationError(ClientError):
    error_code = "VALIDATION_ERROR"
    default_message = "Invalid input"


class JobNotFoundError(ClientError):
    status_code = 404
    error_code = "JOB_NOT_FOUND"
    default_message = "Job application not found"


# --- auth errors ---

class AuthenticationError(AppError):
    kind = "auth"
    status_code = 401
    error_code = "UNAUTHENTICATED"
    default_message = "Invalid authentication token"


# --- server errors ---

class DatastoreError(AppError):
    kind = "server"
    status_code = 500
    error_code = "DATASTORE_ERROR"
    default_message = "Internal Server Error"
