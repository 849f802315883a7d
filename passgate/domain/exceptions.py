"""
Domain exceptions - Semantic error types for the credential lifecycle.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Recoverable errors (ValidationError, ConflictError, NotFoundError,
CredentialMismatchError) are converted into result values by the
account service. InternalError is never converted: it propagates so
the transport can report it distinctly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule."""

    field: str
    reason: str


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class ValidationError(AccountError):
    """Registration input failed one or more field rules."""

    def __init__(self, errors: list[FieldError]) -> None:
        if not errors:
            raise ValueError("ValidationError requires at least one FieldError")
        self.errors = tuple(errors)
        super().__init__("; ".join(error.reason for error in self.errors))

    @property
    def field(self) -> str:
        """Name of the first failing field."""
        return self.errors[0].field

    @property
    def reason(self) -> str:
        """Reason the first failing field was rejected."""
        return self.errors[0].reason


class ConflictError(AccountError):
    """Username or email is already registered."""

    pass


class NotFoundError(AccountError):
    """No account exists for the given username."""

    pass


class CredentialMismatchError(AccountError):
    """Password does not match the stored secret."""

    pass


class InternalError(AccountError):
    """Unrecoverable failure inside the core (hashing, corrupt state)."""

    pass


class SecretCorrupted(InternalError):
    """Stored password secret cannot be parsed as a bcrypt hash."""

    pass
