from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from volunteer_match.config import Settings
from volunteer_match.main import create_app
from volunteer_match.services.store import MemoryStore

FIXED_NOW = datetime(2025, 1, 1, 10, 45, 12, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, now_value: datetime = FIXED_NOW) -> None:
        self._now = now_value

    def now(self) -> datetime:
        return self._now


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store(clock):
    """Seeded store isolated to one test."""
    store = MemoryStore(clock=clock)
    store.seed()
    return store


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(settings, store):
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def volunteer_payload():
    return {
        "role": "volunteer",
        "fullName": "Jane Doe",
        "phone": "083-333-3333",
        "email": "jane.doe@example.com",
        "address": "Khon Kaen, Thailand",
        "password": "anything",
        "skills": ["Driving"],
        "interests": ["Transportation"],
        "biography": "Weekend driver.",
    }
