"""Registration and login protocols on top of the credential store."""

import logging
from collections.abc import Mapping
from typing import Any

from app.core.security import generate_salt, hash_password, verify_password
from app.models.credential import Account, CredentialRecord
from app.services.credential_store import CredentialStore
from app.services.errors import Conflict, InvalidCredentials, ValidationError
from app.services.policy import validate_registration

logger = logging.getLogger(__name__)

# Throwaway password hashed at startup; unknown-user logins are checked against it.
_DUMMY_PASSWORD = "unused-Dummy!"


class CredentialService:
    """
    Enforces the registration policy and verifies logins.

    The service never hands out salts or hashes: both protocols return the
    public Account view or raise a CredentialError subclass.
    """

    def __init__(self, store: CredentialStore, bcrypt_rounds: int) -> None:
        self._store = store
        self._bcrypt_rounds = bcrypt_rounds
        self._dummy_salt = generate_salt(bcrypt_rounds)
        self._dummy_hash = hash_password(_DUMMY_PASSWORD, self._dummy_salt)

    def register(self, dto: Mapping[str, Any]) -> Account:
        """
        Validate input, check uniqueness, hash the password with a fresh salt
        and insert the record.

        Raises ValidationError for the first violated rule (username, email,
        role, password) and Conflict when the username or email is taken.
        The store re-checks uniqueness under its lock, so a concurrent winner
        still turns this call into a Conflict.
        """
        try:
            validate_registration(dto)
        except ValidationError as e:
            logger.info("Registration rejected", extra={"reason": e.message})
            raise

        username: str = dto["username"]
        email: str = dto["email"]

        if self._store.find_by_username(username) is not None:
            logger.info("Username already exists", extra={"username": username})
            raise Conflict("username")
        if self._store.find_by_email(email) is not None:
            logger.info("Email already exists", extra={"username": username})
            raise Conflict("email")

        # Hashing is the slow step; it runs before and outside the store lock.
        salt = generate_salt(self._bcrypt_rounds)
        record = CredentialRecord(
            email=email,
            role=dto["role"],
            salt=salt,
            password_hash=hash_password(dto["password"], salt),
        )

        try:
            self._store.insert(username, record)
        except Conflict as e:
            logger.info("Registration lost uniqueness race", extra={"username": username, "field": e.field})
            raise

        logger.info("User registered successfully", extra={"username": username, "role": record.role})
        return Account(username=username, email=record.email, role=record.role)

    def login(self, username: str, password: str) -> Account:
        """Verify a username/password pair. Raises InvalidCredentials on any mismatch."""
        record = self._store.find_by_username(username)
        if record is None:
            # Same bcrypt cost as a real check so timing does not reveal unknown users.
            verify_password(password, self._dummy_salt, self._dummy_hash)
            logger.info("Login failed", extra={"username": username})
            raise InvalidCredentials()

        if not verify_password(password, record.salt, record.password_hash):
            logger.info("Login failed", extra={"username": username})
            raise InvalidCredentials()

        return Account(username=username, email=record.email, role=record.role)
