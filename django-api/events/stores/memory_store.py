"""In-memory implementation of the EventStore.

Used by unit tests and anywhere a database is not wanted. Units of work are
serialized by a lock and roll back by restoring a snapshot.
"""

import threading
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone

from events.domain import Event, EventId, Page, Sort
from events.stores.interfaces import EventStore, StoreError, UniqueViolation, UnitOfWork


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed event store with the same contract as the ORM store."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._events: dict[EventId, Event] = {}
        self._lock = threading.RLock()

    @contextmanager
    def unit_of_work(self) -> Iterator[UnitOfWork]:
        with self._lock:
            snapshot = dict(self._events)
            try:
                yield UnitOfWork(using="memory")
            except BaseException:
                self._events = snapshot
                raise

    def find_page(self, uow: UnitOfWork, sort: Sort, page: Page) -> list[Event]:
        try:
            ordered = sorted(
                self._events.values(),
                key=lambda event: (getattr(event, sort.field), str(event.id)),
                reverse=sort.descending,
            )
        except (AttributeError, TypeError) as exc:
            raise StoreError(f"Cannot sort events by {sort.field!r}") from exc
        return ordered[page.offset : page.offset + page.size]

    def find_by_id(self, uow: UnitOfWork, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def find_by_name(self, uow: UnitOfWork, name: str) -> Event | None:
        return self._holder_of(name)

    def _holder_of(self, name: str) -> Event | None:
        return next((e for e in self._events.values() if e.name == name), None)

    def persist(self, uow: UnitOfWork, event: Event) -> Event:
        # Unique name constraint
        holder = self._holder_of(event.name)
        if holder is not None and holder.id != event.id:
            raise UniqueViolation(f"name {event.name!r} is already taken")

        now = self._clock()
        if event.id is None:
            stored = replace(
                event,
                id=EventId(value=uuid.uuid4()),
                created_at=now,
                updated_at=now,
            )
        elif event.id in self._events:
            stored = replace(
                event,
                created_at=self._events[event.id].created_at,
                updated_at=now,
            )
        else:
            raise StoreError(f"Event {event.id} does not exist")

        self._events[stored.id] = stored
        return stored

    def delete(self, uow: UnitOfWork, event: Event) -> None:
        self._events.pop(event.id, None)
