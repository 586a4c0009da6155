from __future__ import annotations


class DomainError(Exception):
    """Base exception for errors reported to the client as ``{"error": ...}``."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400
    default_message = "Invalid data"


class MissingData(ValidationError):
    """Raised when a required field is absent."""

    default_message = "Missing data"


class InvalidCredentials(DomainError):
    """Raised when login fails, whether the user is unknown or the password is wrong."""

    status_code = 401
    default_message = "Invalid credentials"


class MissingToken(DomainError):
    status_code = 401
    default_message = "No token"


class InvalidToken(DomainError):
    status_code = 401
    default_message = "Invalid token"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403
    default_message = "Forbidden"


class NotFound(DomainError):
    status_code = 404
    default_message = "Not found"


class Conflict(DomainError):
    status_code = 409
    default_message = "Already exists"


class Overloaded(DomainError):
    """Raised when no database connection frees up within the acquisition timeout."""

    status_code = 503
    default_message = "Service overloaded"
