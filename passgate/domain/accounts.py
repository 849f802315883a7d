"""
Account domain service - Registration and authentication.

This module contains the core business logic of the credential
lifecycle.

Registration
============

    validate -> uniqueness check -> derive secret -> insert -> SUCCESS
        |              |                                 |
     INVALID        CONFLICT                      CONFLICT (lost race)

The uniqueness check before hashing avoids paying for bcrypt on an
obvious duplicate. It is not what guarantees uniqueness: the store's
insert re-checks username and email under its lock, so two concurrent
registrations for the same identity cannot both succeed.

Authentication
==============

    lookup -> verify -> SUCCESS
      |         |
  USER_NOT_FOUND  INVALID_CREDENTIALS

Each operation has two forms. create_account() and login() raise
domain exceptions; register() and authenticate() convert the
recoverable ones into tagged results for the transport. InternalError
is logged and re-raised by every form.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import (
    ConflictError,
    CredentialMismatchError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from .ports import (
    AccountRecord,
    AuthResult,
    CredentialStore,
    LoginInput,
    RegisterResult,
    RegistrationInput,
    Role,
    SecretManager,
)
from .validation import Validator, normalize_email

logger = logging.getLogger(__name__)


@dataclass
class AccountService:
    """
    Domain service owning the credential store.

    The store is never handed out to callers; all reads and writes go
    through register/authenticate and their raising counterparts.
    """

    store: CredentialStore
    secrets: SecretManager
    validator: Validator = field(default_factory=Validator)

    def create_account(self, data: RegistrationInput) -> AccountRecord:
        """
        Validate input and create a new account.

        Args:
            data: Raw registration fields

        Returns:
            The stored account record

        Raises:
            ValidationError: If any field is missing or malformed
            ConflictError: If the username or email is already registered
            InternalError: If the password secret cannot be derived
        """
        self.validator.validate(data)

        # Validator guarantees every field is a well-formed str
        username: str = data.username  # type: ignore[assignment]
        email = normalize_email(data.email)  # type: ignore[arg-type]
        password: str = data.password  # type: ignore[assignment]

        if self.store.find_by_email(email) or self.store.find_by_username(username):
            raise ConflictError(username)

        record = AccountRecord(
            username=username,
            email=email,
            role=Role(data.role),
            password_secret=self._derive(password),
        )

        if not self.store.insert(record):
            raise ConflictError(username)

        logger.info("Registered account %s (role=%s)", username, record.role.value)
        return record

    def register(self, data: RegistrationInput) -> RegisterResult:
        """
        Register a new account and report the outcome as a result value.

        Returns:
            RegisterResult tagged SUCCESS, INVALID(field, reason) or CONFLICT

        Raises:
            InternalError: If the password secret cannot be derived
        """
        try:
            self.create_account(data)
        except ValidationError as e:
            logger.info("Registration rejected: %s", e.reason)
            return RegisterResult.invalid(e.field, e.reason)
        except ConflictError as e:
            logger.warning("Registration conflict for username %s", e)
            return RegisterResult.conflict()
        return RegisterResult.success()

    def login(self, username: str, password: str) -> AccountRecord:
        """
        Verify credentials and return the matching account.

        Raises:
            NotFoundError: If no account exists for username
            CredentialMismatchError: If the password does not match
            InternalError: If the stored secret is corrupt
        """
        record = self.store.find_by_username(username)
        if record is None:
            raise NotFoundError(username)

        try:
            matches = self.secrets.verify(password, record.password_secret)
        except InternalError:
            logger.exception("Cannot verify password for %s", username)
            raise

        if not matches:
            raise CredentialMismatchError(username)
        return record

    def authenticate(self, credentials: LoginInput) -> AuthResult:
        """
        Verify a login attempt and report the outcome as a result value.

        Returns:
            AuthResult SUCCESS, INVALID_CREDENTIALS or USER_NOT_FOUND

        Raises:
            InternalError: If the stored secret is corrupt
        """
        try:
            self.login(credentials.username, credentials.password)
        except NotFoundError:
            logger.warning("Login for unknown username %s", credentials.username)
            return AuthResult.USER_NOT_FOUND
        except CredentialMismatchError:
            logger.warning("Login with wrong password for %s", credentials.username)
            return AuthResult.INVALID_CREDENTIALS
        return AuthResult.SUCCESS

    def _derive(self, password: str) -> str:
        try:
            return self.secrets.derive(password)
        except InternalError:
            logger.exception("Password secret derivation failed")
            raise
