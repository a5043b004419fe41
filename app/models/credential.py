"""In-memory models for stored credentials and the public account view."""

from dataclasses import dataclass
from typing import Literal

Role = Literal["user", "admin"]

ROLES: tuple[str, ...] = ("user", "admin")


@dataclass(frozen=True)
class CredentialRecord:
    """
    Stored credential for one account, keyed by username in the store.

    email and role are copies of the account identity; salt and password_hash
    never leave the service layer.
    """

    email: str
    role: Role
    salt: str
    password_hash: str

    def __repr__(self) -> str:
        return f"CredentialRecord(email={self.email!r}, role={self.role!r})"


@dataclass(frozen=True)
class Account:
    """Public account identity returned to callers (no secrets)."""

    username: str
    email: str
    role: Role
