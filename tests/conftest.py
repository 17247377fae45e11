"""
Pytest fixtures for the reasoning assistant tests.

Randomness is pinned with a seeded random.Random, history lives in memory
unless a test asks for a file, and the API client gets its own orchestrator
through FastAPI dependency overrides.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from reasoning_api.reasoning.orchestrator import Orchestrator
from reasoning_api.store import InMemoryHistoryStore


class _FixedChoice:
    """Stand-in random source whose choice() always returns the same index."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return seq[self.index]


class _TickingClock:
    """Returns a strictly increasing UTC timestamp on every call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 2, 7, 10, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def fixed_choice():
    """Factory for a random source pinned to one index of the sequence it is given."""
    return _FixedChoice


@pytest.fixture
def clock():
    return _TickingClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return InMemoryHistoryStore()


@pytest.fixture
def orchestrator(store, rng, clock):
    return Orchestrator(store=store, rng=rng, clock=clock)


@pytest.fixture
def client(orchestrator):
    """FastAPI TestClient wired to the test orchestrator."""
    from fastapi.testclient import TestClient

    from reasoning_api.deps import get_orchestrator
    from reasoning_api.main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
