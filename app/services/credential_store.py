"""Volatile credential store keyed by username, with an email index."""

import logging
import threading

from app.models.credential import CredentialRecord
from app.services.errors import Conflict

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Authoritative in-memory storage of credential records.

    insert() is serialised by a lock and re-checks both uniqueness keys inside
    it, so concurrent registrations cannot both claim a username or email.
    Lookups read without taking the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, CredentialRecord] = {}
        self._usernames_by_email: dict[str, str] = {}

    def insert(self, username: str, record: CredentialRecord) -> None:
        """Store a new record. Raises Conflict if the username or email is taken."""
        with self._lock:
            if username in self._records:
                raise Conflict("username")
            if record.email in self._usernames_by_email:
                raise Conflict("email")
            self._records[username] = record
            self._usernames_by_email[record.email] = username
        logger.debug("Credential record stored", extra={"username": username})

    def find_by_username(self, username: str) -> CredentialRecord | None:
        return self._records.get(username)

    def find_by_email(self, email: str) -> CredentialRecord | None:
        username = self._usernames_by_email.get(email)
        if username is None:
            return None
        return self._records.get(username)

    def __len__(self) -> int:
        return len(self._records)
