"""
Port interfaces - Data model and Protocol definitions.

This module defines the records and result types the domain works with,
and the interfaces (ports) it requires from infrastructure. Adapters
implement these protocols.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class Role(str, Enum):
    """Account roles accepted at registration."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class AccountRecord:
    """
    Stored representation of a registered identity.

    Records are created once by a successful registration and never
    mutated afterwards. The password secret is excluded from repr so
    records can be logged safely.
    """

    username: str
    email: str
    role: Role
    password_secret: str = field(repr=False)


@dataclass(frozen=True)
class RegistrationInput:
    """
    Caller-supplied registration fields.

    Any field may be None when the caller omitted it; the validator
    reports missing fields as failures.
    """

    username: str | None = None
    email: str | None = None
    role: str | None = None
    password: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class LoginInput:
    """Caller-supplied login fields."""

    username: str
    password: str = field(repr=False)


class RegisterOutcome(Enum):
    """Tag of a registration result."""

    SUCCESS = "success"
    INVALID = "invalid"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class RegisterResult:
    """
    Result of a registration attempt.

    field and reason are set only for INVALID outcomes and name the
    first rule that failed.
    """

    outcome: RegisterOutcome
    field: str | None = None
    reason: str | None = None

    @classmethod
    def success(cls) -> "RegisterResult":
        return cls(RegisterOutcome.SUCCESS)

    @classmethod
    def conflict(cls) -> "RegisterResult":
        return cls(RegisterOutcome.CONFLICT)

    @classmethod
    def invalid(cls, field: str, reason: str) -> "RegisterResult":
        return cls(RegisterOutcome.INVALID, field=field, reason=reason)


class AuthResult(Enum):
    """
    Result of an authentication attempt.

    USER_NOT_FOUND and INVALID_CREDENTIALS are kept distinct so callers
    can map them to different responses.
    """

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    USER_NOT_FOUND = "user_not_found"


class CredentialStore(Protocol):
    """Port interface for account record storage."""

    def find_by_username(self, username: str) -> AccountRecord | None:
        """Return the record stored under username, or None."""
        ...

    def find_by_email(self, email: str) -> AccountRecord | None:
        """Return the record registered with email, or None."""
        ...

    def insert(self, record: AccountRecord) -> bool:
        """
        Atomically insert a new record.

        Both the username and the email of the record are checked and
        claimed in a single critical section.

        Args:
            record: Fully built account record

        Returns:
            True if inserted, False if the username or email already exists
        """
        ...


class SecretManager(Protocol):
    """Port interface for one-way password secrets."""

    def derive(self, password: str) -> str:
        """
        Derive a salted, non-reversible secret from a password.

        Each call uses a fresh salt, so repeated calls differ.
        """
        ...

    def verify(self, password: str, secret: str) -> bool:
        """
        Check a candidate password against a stored secret.

        Raises:
            SecretCorrupted: If the stored secret is malformed
        """
        ...
