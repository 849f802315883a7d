"""
Registration input validation.

Field rules:
- username: 3 to 24 characters
- email: syntactically valid address (email-validator, no DNS lookups)
- role: "user" or "admin"
- password: 5 to 24 characters with a lowercase letter, an uppercase
  letter and a special character (neither letter, digit nor whitespace)

Every rule is evaluated before returning, so a single ValidationError
carries all failing fields. No I/O, no side effects.
"""

from email_validator import EmailNotValidError, validate_email

from .exceptions import FieldError, ValidationError
from .ports import RegistrationInput, Role

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 24
PASSWORD_MIN_LEN = 5
PASSWORD_MAX_LEN = 24

_ROLES = frozenset(role.value for role in Role)


def normalize_email(email: str) -> str:
    """
    Validate and normalize email address for consistent storage and lookup.

    Applies: strip whitespace, email-validator normalization, lowercase

    Raises:
        EmailNotValidError: If the address is not syntactically valid
    """
    validated = validate_email(email.strip(), check_deliverability=False)
    return validated.normalized.lower()


def _is_special(ch: str) -> bool:
    return not ch.isalnum() and not ch.isspace()


class Validator:
    """Stateless field-shape checker for registration input."""

    def validate(self, data: RegistrationInput) -> None:
        """
        Check every registration field.

        Raises:
            ValidationError: If any field is missing or malformed
        """
        errors: list[FieldError] = []
        for check in (
            self._check_username,
            self._check_email,
            self._check_role,
            self._check_password,
        ):
            error = check(data)
            if error is not None:
                errors.append(error)

        if errors:
            raise ValidationError(errors)

    def _check_username(self, data: RegistrationInput) -> FieldError | None:
        username = data.username
        if not isinstance(username, str):
            return FieldError("username", "username is required")
        if not USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN:
            return FieldError(
                "username",
                f"username must be between {USERNAME_MIN_LEN} and {USERNAME_MAX_LEN} characters",
            )
        return None

    def _check_email(self, data: RegistrationInput) -> FieldError | None:
        if not isinstance(data.email, str):
            return FieldError("email", "email is required")
        try:
            normalize_email(data.email)
        except EmailNotValidError:
            return FieldError("email", "email must be a valid email address")
        return None

    def _check_role(self, data: RegistrationInput) -> FieldError | None:
        if not isinstance(data.role, str):
            return FieldError("role", "role is required")
        if data.role not in _ROLES:
            return FieldError("role", f"role must be one of: {', '.join(sorted(_ROLES))}")
        return None

    def _check_password(self, data: RegistrationInput) -> FieldError | None:
        password = data.password
        if not isinstance(password, str):
            return FieldError("password", "password is required")
        if not PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN:
            return FieldError(
                "password",
                f"password must be between {PASSWORD_MIN_LEN} and {PASSWORD_MAX_LEN} characters",
            )
        if not any(ch.islower() for ch in password):
            return FieldError("password", "password must contain a lowercase letter")
        if not any(ch.isupper() for ch in password):
            return FieldError("password", "password must contain an uppercase letter")
        if not any(_is_special(ch) for ch in password):
            return FieldError("password", "password must contain a special character")
        return None
