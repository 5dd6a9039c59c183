"""Exceptions raised by cred commands."""


class CredError(Exception):
    """Base class for errors reported to the user by the cred CLI."""


class InvalidCredentialsError(CredError):
    """Raised when STS rejects the resolved credentials."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


class CredentialsNotSetError(CredError):
    pass


class CredentialsNotTemporaryError(CredError):
    pass


class ExpirationNotRecordedError(CredError):
    pass


class ExpirationInvalidError(CredError):
    pass
