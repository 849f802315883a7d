"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fresh in-memory credential store per test
- A low-cost bcrypt secret manager (cost 4) so tests stay fast
- An account service wired to both
"""

import pytest

from passgate.adapters.hashing.bcrypt_secrets import BcryptSecretManager
from passgate.adapters.repository import InMemoryCredentialStore
from passgate.domain.accounts import AccountService
from passgate.domain.ports import RegistrationInput

FAST_COST = 4


@pytest.fixture
def store() -> InMemoryCredentialStore:
    """Create an empty credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def secret_manager() -> BcryptSecretManager:
    """Create a bcrypt secret manager with the minimum work factor."""
    return BcryptSecretManager(cost=FAST_COST)


@pytest.fixture
def service(
    store: InMemoryCredentialStore, secret_manager: BcryptSecretManager
) -> AccountService:
    """Create an account service backed by real adapters."""
    return AccountService(store=store, secrets=secret_manager)


@pytest.fixture
def alice() -> RegistrationInput:
    """Valid registration input for the reference account."""
    return RegistrationInput(
        username="alice", email="a@b.com", role="user", password="Abc123!"
    )
