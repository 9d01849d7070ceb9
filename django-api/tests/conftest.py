"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.domain import Event
from events.services import EventService
from events.stores.memory_store import InMemoryEventStore

START = datetime(2030, 5, 1, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock for store timestamps."""

    def __init__(self, now: datetime = datetime(2030, 1, 1, tzinfo=timezone.utc)) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryEventStore:
    return InMemoryEventStore(clock=clock)


@pytest.fixture
def service(store: InMemoryEventStore) -> EventService:
    return EventService(store)


@pytest.fixture
def make_event():
    """Build a valid candidate Event; override any field by keyword."""

    def _make(**overrides) -> Event:
        values = {
            "name": "Conf A",
            "description": "Test description",
            "price": Decimal("10.00"),
            "location": "Test location",
            "start_date": START,
            "end_date": START + timedelta(hours=8),
            "organizer_id": uuid.uuid4(),
        }
        values.update(overrides)
        return Event(**values)

    return _make


@pytest.fixture
def event_payload():
    """Build a valid JSON body for POST /api/events."""

    def _payload(**overrides) -> dict:
        values = {
            "name": "Conf A",
            "description": "Test description",
            "price": "10.00",
            "location": "Test location",
            "start_date": START.isoformat(),
            "end_date": (START + timedelta(hours=8)).isoformat(),
            "organizer_id": str(uuid.uuid4()),
        }
        values.update(overrides)
        return values

    return _payload
