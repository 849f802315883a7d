"""
Shared fixtures for adversarial tests.

Provides a barrier-synchronized runner so concurrent attack calls
start as close to simultaneously as possible.
"""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import pytest

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

T = TypeVar("T")


def _run_concurrently(attacks: list[Callable[[], T]]) -> list[T]:
    """Run every attack on its own thread, released together by a barrier."""
    barrier = threading.Barrier(len(attacks))

    def release(attack: Callable[[], T]) -> T:
        barrier.wait()
        return attack()

    with ThreadPoolExecutor(max_workers=len(attacks)) as executor:
        futures = [executor.submit(release, attack) for attack in attacks]
        return [f.result() for f in futures]


@pytest.fixture
def run_concurrently() -> Callable[[list[Callable[[], T]]], list[T]]:
    """Provide the barrier-synchronized concurrent runner."""
    return _run_concurrently
