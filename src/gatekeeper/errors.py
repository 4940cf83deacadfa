from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class MissingCredentialError(AuthenticationError):
    """Raised when no credential (header or cookie) was supplied.

    ``challenge`` is sent back as the WWW-Authenticate header when set.
    """

    def __init__(self, message: str = "Credentials required", challenge: str | None = None) -> None:
        super().__init__(message)
        self.challenge = challenge


class InvalidCredentialsError(AuthenticationError):
    """Raised when a submitted username/password pair does not match."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class InvalidOrExpiredSessionError(AuthenticationError):
    """Raised when a session token is unknown or past its expiry."""

    def __init__(self, message: str = "Invalid or expired session") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a user tries to access a resource they do not have permission for."""


class ForbiddenError(AccessDeniedError):
    """Raised when credentials were supplied but rejected."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)
