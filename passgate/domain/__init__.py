"""
Domain layer - Pure business logic with zero framework imports.

This package contains the credential lifecycle: registration input
validation, uniqueness enforcement, and login verification. It defines
its own port interfaces for storage and password secrets, so adapters
can be swapped without touching the rules.
"""

from .accounts import AccountService
from .exceptions import (
    AccountError,
    ConflictError,
    CredentialMismatchError,
    FieldError,
    InternalError,
    NotFoundError,
    SecretCorrupted,
    ValidationError,
)
from .ports import (
    AccountRecord,
    AuthResult,
    CredentialStore,
    LoginInput,
    RegisterOutcome,
    RegisterResult,
    RegistrationInput,
    Role,
    SecretManager,
)
from .validation import Validator

__all__ = [
    "AccountError",
    "AccountRecord",
    "AccountService",
    "AuthResult",
    "ConflictError",
    "CredentialMismatchError",
    "CredentialStore",
    "FieldError",
    "InternalError",
    "LoginInput",
    "NotFoundError",
    "RegisterOutcome",
    "RegisterResult",
    "RegistrationInput",
    "Role",
    "SecretCorrupted",
    "SecretManager",
    "ValidationError",
    "Validator",
]
