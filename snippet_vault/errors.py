"""Domain errors raised by the authentication core.

Messages on these exceptions may be shown to clients, so they never carry
token contents, digests or storage internals.
"""


class AuthError(Exception):
    """Base class for credential and registration failures."""


class DuplicateEmailError(AuthError):
    """Raised when registering an email that already has an account."""

    def __init__(self, message: str = "Email already registered") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised for an unknown email or a wrong password, without saying which."""

    def __init__(self, message: str = "Incorrect email or password") -> None:
        super().__init__(message)


class TokenError(Exception):
    """Base class for session token failures."""


class MalformedTokenError(TokenError):
    """The token is not structurally a token this server issues."""


class BadSignatureError(TokenError):
    """The token signature does not match its contents."""


class TokenExpiredError(TokenError):
    """The token is past its expiry time."""


class StorageUnavailableError(Exception):
    """The relational store failed; the request cannot be completed."""

    def __init__(self, message: str = "Storage unavailable") -> None:
        super().__init__(message)
