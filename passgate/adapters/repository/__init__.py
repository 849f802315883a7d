"""Repository adapters - Credential store implementations."""

from .memory import InMemoryCredentialStore

__all__ = ["InMemoryCredentialStore"]
