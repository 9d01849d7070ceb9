"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every call takes the
UnitOfWork opened by ``unit_of_work()``; there is no ambient transaction.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from dataclasses import dataclass

from events.domain import Event, EventId, Page, Sort


class StoreError(Exception):
    """Any failure surfaced by a store."""


class UniqueViolation(StoreError):
    """The store-level uniqueness constraint on the event name fired."""


@dataclass(frozen=True)
class UnitOfWork:
    """Handle on one open transaction."""

    using: str


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[UnitOfWork]:
        """Open a transaction; commit on exit, roll back if the body raises."""
        ...

    @abstractmethod
    def find_page(self, uow: UnitOfWork, sort: Sort, page: Page) -> list[Event]:
        """Return one page of events ordered by ``sort``."""
        ...

    @abstractmethod
    def find_by_id(self, uow: UnitOfWork, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_name(self, uow: UnitOfWork, name: str) -> Event | None:
        """Return the event with this exact name, or None."""
        ...

    @abstractmethod
    def persist(self, uow: UnitOfWork, event: Event) -> Event:
        """Insert a new event (id is None) or update an existing one.

        Returns the stored event with id and timestamps filled in.

        Raises:
            UniqueViolation: If another event already holds the name.
        """
        ...

    @abstractmethod
    def delete(self, uow: UnitOfWork, event: Event) -> None:
        """Permanently remove an event."""
        ...
