"""
bcrypt secret manager adapter - Implements SecretManager protocol.

A password secret is the standard bcrypt string

    $2b$<cost>$<22-char salt><31-char hash>

so the salt travels with the hash and verify() needs nothing else.
gensalt() draws a fresh salt on every call, which makes two secrets
for the same password differ; they can only be compared via checkpw().

bcrypt only reads the first 72 bytes of its input; passwords are
truncated to that length on both derive and verify.
"""

import logging
import re

import bcrypt

from passgate.domain.exceptions import InternalError, SecretCorrupted

logger = logging.getLogger(__name__)

DEFAULT_COST = 10
_BCRYPT_MAX_BYTES = 72

# $2b$<cost>$ followed by 22 salt + 31 hash chars of bcrypt base64
_SECRET_PATTERN = re.compile(r"\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}")


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptSecretManager:
    """
    Implements SecretManager protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int = DEFAULT_COST) -> None:
        """
        Initialize secret manager with a work factor.

        Args:
            cost: bcrypt log2 rounds (4-31)
        """
        if not 4 <= cost <= 31:
            raise ValueError(f"bcrypt cost must be between 4 and 31, got {cost}")
        self.cost = cost

    def derive(self, password: str) -> str:
        """
        Hash password using bcrypt with a fresh salt.

        Raises:
            InternalError: If bcrypt fails
        """
        try:
            return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.cost)).decode()
        except ValueError as e:
            raise InternalError("bcrypt hashing failed") from e

    def verify(self, password: str, secret: str) -> bool:
        """
        Compare password against a stored secret in constant time.

        Raises:
            SecretCorrupted: If secret is not a well-formed bcrypt hash
        """
        # checkpw only rejects a bad salt; a damaged hash part would just mismatch
        if not _SECRET_PATTERN.fullmatch(secret):
            raise SecretCorrupted("stored password secret is malformed")
        try:
            return bcrypt.checkpw(_encode(password), secret.encode())
        except ValueError as e:
            # bcrypt rejects malformed salts/hashes with ValueError("Invalid salt")
            raise SecretCorrupted("stored password secret is malformed") from e
