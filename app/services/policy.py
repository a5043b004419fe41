"""Registration input policy: field rules checked in a fixed order."""

import re
from collections.abc import Callable, Mapping
from typing import Any

from email_validator import EmailNotValidError, validate_email

from app.models.credential import ROLES
from app.services.errors import ValidationError

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 24
PASSWORD_MIN_LEN = 5
PASSWORD_MAX_LEN = 24
PASSWORD_SYMBOLS = "!@#$%^&*"

_LOWERCASE_RE = re.compile(r"[a-z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_SYMBOL_RE = re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]")


def check_username(username: str) -> None:
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise ValidationError(
            f"username length must be between {USERNAME_MIN_LEN} and {USERNAME_MAX_LEN} characters"
        )


def check_email(email: str) -> None:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError("email must be a valid email") from e


def check_role(role: str) -> None:
    if role not in ROLES:
        raise ValidationError(f"role must be one of [{', '.join(ROLES)}]")


def check_password(password: str) -> None:
    """
    Length in [PASSWORD_MIN_LEN, PASSWORD_MAX_LEN] plus at least one lowercase
    letter, one uppercase letter and one symbol from PASSWORD_SYMBOLS, anywhere
    in the string. Each class is checked on its own.
    """
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise ValidationError(
            f"password length must be between {PASSWORD_MIN_LEN} and {PASSWORD_MAX_LEN} characters"
        )
    if not _LOWERCASE_RE.search(password):
        raise ValidationError("password must contain at least one lowercase letter")
    if not _UPPERCASE_RE.search(password):
        raise ValidationError("password must contain at least one uppercase letter")
    if not _SYMBOL_RE.search(password):
        raise ValidationError(
            f"password must contain at least one of the symbols {PASSWORD_SYMBOLS}"
        )


# Check order is part of the contract: the first failing field is reported.
FIELD_RULES: tuple[tuple[str, Callable[[str], None]], ...] = (
    ("username", check_username),
    ("email", check_email),
    ("role", check_role),
    ("password", check_password),
)


def validate_registration(dto: Mapping[str, Any]) -> None:
    """
    Raise ValidationError for the first rule the registration input violates.
    Unknown keys are reported only after every known field has passed.
    """
    for field, rule in FIELD_RULES:
        value = dto.get(field)
        if value is None:
            raise ValidationError(f"{field} is required")
        if not isinstance(value, str):
            raise ValidationError(f"{field} must be a string")
        rule(value)

    known = {field for field, _ in FIELD_RULES}
    for key in dto:
        if key not in known:
            raise ValidationError(f"{key} is not allowed")
