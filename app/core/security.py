"""Salt generation, password hashing and constant-time verification."""

import base64
import hashlib
import hmac

import bcrypt


def _password_bytes(plain_password: str) -> bytes:
    # bcrypt ignores input past 72 bytes; a base64 SHA-256 digest is 44 bytes and
    # keeps every character of the password significant.
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def generate_salt(rounds: int) -> str:
    """Return a fresh bcrypt salt (16 random bytes) encoding the given work factor."""
    return bcrypt.gensalt(rounds=rounds).decode("utf-8")


def hash_password(plain_password: str, salt: str) -> str:
    """Hash a plain-text password with an explicit salt. Do not store plain passwords."""
    return bcrypt.hashpw(_password_bytes(plain_password), salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, salt: str, password_hash: str) -> bool:
    """
    Recompute the salted hash and compare it to the stored one.
    The comparison runs in constant time regardless of where the digests differ.
    """
    try:
        candidate = hash_password(plain_password, salt)
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), password_hash.encode("utf-8"))
