"""
In-memory repository adapter - Implements CredentialStore protocol.

Records live in a primary map keyed by username, with a secondary
index from normalized email to username. Both maps are only touched
under a single lock, so insert() checks and claims the two keys as
one atomic step and a concurrent duplicate registration cannot slip
between the check and the write.

The store is volatile: it lives for the lifetime of the process and
is emptied by close() at shutdown.
"""

import logging
import threading

from passgate.domain.ports import AccountRecord

logger = logging.getLogger(__name__)


class InMemoryCredentialStore:
    """
    Implements CredentialStore protocol with plain dicts.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._accounts: dict[str, AccountRecord] = {}
        self._email_index: dict[str, str] = {}

    def find_by_username(self, username: str) -> AccountRecord | None:
        with self._lock:
            return self._accounts.get(username)

    def find_by_email(self, email: str) -> AccountRecord | None:
        with self._lock:
            username = self._email_index.get(email)
            if username is None:
                return None
            return self._accounts[username]

    def insert(self, record: AccountRecord) -> bool:
        """
        Atomically insert a new record.

        Args:
            record: Account record with normalized email

        Returns:
            True if inserted, False if username or email already exists
        """
        with self._lock:
            if record.username in self._accounts or record.email in self._email_index:
                return False
            self._accounts[record.username] = record
            self._email_index[record.email] = record.username
            return True

    def count(self) -> int:
        """Number of stored records."""
        with self._lock:
            return len(self._accounts)

    def close(self) -> None:
        """Drop every record."""
        with self._lock:
            dropped = len(self._accounts)
            self._accounts.clear()
            self._email_index.clear()
        logger.info("Credential store closed (%d records dropped)", dropped)
