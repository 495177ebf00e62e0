"""
Admin account use cases: creation and credential checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from salon.core.security import hash_password, verify_password
from salon.repositories.json_storage import RecordStore

logger = logging.getLogger(__name__)

TABLE = "admins"


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class RegistrationError(AuthError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccountExistsError(AuthError):
    pass


class InvalidCredentialsError(AuthError):
    pass


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def public_admin(admin: dict) -> dict:
    """Fields of an admin record that are safe to send to the browser."""
    return {"id": admin.get("id"), "email": admin.get("email", ""), "full_name": admin.get("full_name", "")}


@dataclass
class AuthService:
    """Creates admin accounts and checks login credentials."""

    store: RecordStore

    def has_admins(self) -> bool:
        return bool(self.store.read(TABLE))

    def find_by_email(self, email: str) -> Optional[dict]:
        wanted = normalize_email(email)
        for admin in self.store.read(TABLE):
            if normalize_email(admin.get("email")) == wanted:
                return admin
        return None

    def create_admin(self, email: str, password: str, full_name: str, *, provider: str = "email") -> dict:
        email_norm = normalize_email(email)
        name = (full_name or "").strip()
        if not email_norm or not password or not name:
            raise RegistrationError("All fields required")
        if self.find_by_email(email_norm):
            raise AccountExistsError(email_norm)
        admin = self.store.insert(
            TABLE,
            {
                "email": email_norm,
                "password": hash_password(password),
                "full_name": name,
                "provider": provider,
            },
        )
        logger.info("Created admin account %s", email_norm)
        return admin

    def authenticate(self, email: str, password: str) -> dict:
        admin = self.find_by_email(email)
        if not admin or not verify_password(password, admin.get("password")):
            raise InvalidCredentialsError(normalize_email(email))
        return admin
