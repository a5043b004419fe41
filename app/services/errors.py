"""Errors raised by the credential store and service."""

from typing import Literal

ConflictField = Literal["username", "email"]

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class CredentialError(Exception):
    """Base class for expected, user-facing credential outcomes."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(CredentialError):
    """Raised when registration input violates the input policy (first failing rule)."""


class Conflict(CredentialError):
    """Raised when a username or email is already registered."""

    def __init__(self, field: ConflictField) -> None:
        self.field = field
        super().__init__(f"{field.capitalize()} already exists")


class InvalidCredentials(CredentialError):
    """Raised on failed login. Never says whether the user exists."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)
