"""Credential data models."""

from app.models.credential import ROLES, Account, CredentialRecord, Role

__all__ = ["ROLES", "Account", "CredentialRecord", "Role"]
