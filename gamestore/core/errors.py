"""Domain errors. Each carries the HTTP status and the message shown to clients."""


class AppError(Exception):
    """Base class for errors rendered as ``{"message": ...}`` responses."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or invalid input."""

    default_message = "Missing fields"


class DuplicateIdentity(AppError):
    """Username or email already registered."""

    default_message = "Email or username already in use"


class InvalidCredentials(AppError):
    default_message = "Invalid credentials"


class AlreadyPresent(AppError):
    """Game is already in the user's library."""

    default_message = "Already in library"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class AuthError(AppError):
    """Bearer credential missing or rejected."""

    status_code = 401
    default_message = "Not authenticated"


class MissingToken(AuthError):
    default_message = "No token provided"


class MalformedToken(AuthError):
    default_message = "Malformed token"


class InvalidToken(AuthError):
    default_message = "Invalid or expired token"


class Forbidden(AppError):
    status_code = 403
    default_message = "Admin access required"
