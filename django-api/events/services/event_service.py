"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every public operation runs inside one unit of work opened on the store, and
every store call classifies its own failure before it leaves this module.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from decimal import Decimal
from enum import Enum

from events.domain import (
    LOCATION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    DomainError,
    Event,
    EventId,
    EventPatch,
    Page,
    Sort,
)
from events.stores.interfaces import EventStore, StoreError, UniqueViolation, UnitOfWork

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Context tag for log lines."""

    LIST = "LIST"
    DETAILS = "DETAILS"
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


def _database_error(operation: Operation, message: str, cause: BaseException) -> DomainError:
    logger.error("[%s] %s", operation.value, message, exc_info=cause)
    return DomainError.database_error(message)


def _conflict(operation: Operation, name: str) -> DomainError:
    message = f"Event with name {name} already exists"
    logger.debug("[%s] %s", operation.value, message)
    return DomainError.conflict(message)


def _price_fits_column(price: Decimal) -> bool:
    _, digits, exponent = price.normalize().as_tuple()
    decimal_places = max(-exponent, 0)
    integer_digits = max(len(digits) + exponent, 0)
    return (
        decimal_places <= PRICE_DECIMAL_PLACES
        and integer_digits <= PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES
    )


def _validate(
    price: Decimal | None = None,
    name: str | None = None,
    location: str | None = None,
) -> None:
    """Check caller-supplied values; None means the value was not supplied."""
    if price is not None:
        if not price.is_finite() or price <= 0:
            raise DomainError.invalid_argument("Price must be greater than 0")
        if not _price_fits_column(price):
            raise DomainError.invalid_argument(
                f"Price must have at most {PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES} "
                f"integer digits and {PRICE_DECIMAL_PLACES} decimal places"
            )
    if name is not None and not 1 <= len(name) <= NAME_MAX_LENGTH:
        raise DomainError.invalid_argument(
            f"Name must be between 1 and {NAME_MAX_LENGTH} characters"
        )
    if location is not None and len(location) > LOCATION_MAX_LENGTH:
        raise DomainError.invalid_argument(
            f"Location must be at most {LOCATION_MAX_LENGTH} characters"
        )


class EventService:
    """Service for event lifecycle operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self, page: Page, sort: Sort) -> list[Event]:
        """Return one page of events in the requested order.

        Raises:
            DomainError: DATABASE_ERROR if the store fails.
        """
        logger.debug("Listing events with %s and %s", page, sort)
        with self._unit_of_work(Operation.LIST) as uow:
            try:
                return self._store.find_page(uow, sort, page)
            except StoreError as exc:
                raise _database_error(Operation.LIST, "Failed to list events", exc) from exc

    def get_event_details(self, event_id: EventId) -> Event:
        """Return an event by ID.

        Raises:
            DomainError: NOT_FOUND if the event does not exist,
                DATABASE_ERROR if the store fails.
        """
        logger.debug("Getting event details for event with id %s", event_id)
        with self._unit_of_work(Operation.DETAILS) as uow:
            return self._find_event_or_fail(uow, event_id, Operation.DETAILS)

    def create_event(self, candidate: Event) -> EventId:
        """Persist a new event and return its assigned ID.

        Any caller-supplied id is discarded.

        Raises:
            DomainError: INVALID_ARGUMENT for a rule violation (checked before
                the store is touched), CONFLICT if the name is taken,
                DATABASE_ERROR if the store fails.
        """
        logger.debug("Creating event %s", candidate)
        _validate(price=candidate.price, name=candidate.name, location=candidate.location)
        candidate = replace(candidate, id=None)

        with self._unit_of_work(Operation.CREATE) as uow:
            self._check_name_conflict(uow, candidate.name, None, Operation.CREATE)
            created = self._persist_event_or_fail(uow, candidate, Operation.CREATE)
        return created.id

    def update_event(self, patch: EventPatch) -> EventId:
        """Apply a sparse patch to an existing event and return its ID.

        The name conflict check runs before the existence check, so a missing
        event whose patch collides with another event's name is a CONFLICT.

        Raises:
            DomainError: INVALID_ARGUMENT, CONFLICT, NOT_FOUND or DATABASE_ERROR.
        """
        logger.debug("Updating event %s", patch)
        present = patch.present_fields()
        _validate(
            price=present.get("price"),
            name=present.get("name"),
            location=present.get("location"),
        )

        with self._unit_of_work(Operation.UPDATE) as uow:
            if patch.is_set("name"):
                self._check_name_conflict(uow, patch.name, patch.id, Operation.UPDATE)
            existing = self._find_event_or_fail(uow, patch.id, Operation.UPDATE)
            merged = self._persist_event_or_fail(uow, existing.merge(patch), Operation.UPDATE)
        return merged.id

    def delete_event(self, event_id: EventId) -> None:
        """Permanently remove an event.

        Raises:
            DomainError: NOT_FOUND if the event does not exist,
                DATABASE_ERROR if the store fails.
        """
        logger.debug("Deleting event with id %s", event_id)
        with self._unit_of_work(Operation.DELETE) as uow:
            existing = self._find_event_or_fail(uow, event_id, Operation.DELETE)
            try:
                self._store.delete(uow, existing)
            except StoreError as exc:
                raise _database_error(
                    Operation.DELETE, f"Failed to delete event with id {event_id}", exc
                ) from exc
        logger.debug("[%s] Deleted event with id %s", Operation.DELETE.value, event_id)

    @contextmanager
    def _unit_of_work(self, operation: Operation) -> Iterator[UnitOfWork]:
        # Covers failures while opening or committing the transaction.
        try:
            with self._store.unit_of_work() as uow:
                yield uow
        except UniqueViolation as exc:
            message = "Event name conflicts with an existing event"
            logger.debug("[%s] %s", operation.value, message)
            raise DomainError.conflict(message) from exc
        except StoreError as exc:
            raise _database_error(operation, "Transaction failed", exc) from exc

    def _check_name_conflict(
        self,
        uow: UnitOfWork,
        name: str,
        own_id: EventId | None,
        operation: Operation,
    ) -> None:
        try:
            existing = self._store.find_by_name(uow, name)
        except StoreError as exc:
            raise _database_error(
                operation, f"Failed to get event with name {name}", exc
            ) from exc
        if existing is not None and existing.id != own_id:
            raise _conflict(operation, name)

    def _find_event_or_fail(
        self, uow: UnitOfWork, event_id: EventId, operation: Operation
    ) -> Event:
        try:
            event = self._store.find_by_id(uow, event_id)
        except StoreError as exc:
            raise _database_error(
                operation, f"Failed to get event with id {event_id}", exc
            ) from exc
        if event is None:
            message = f"Event with id {event_id} does not exist"
            logger.debug("[%s] %s", operation.value, message)
            raise DomainError.not_found(message)
        return event

    def _persist_event_or_fail(
        self, uow: UnitOfWork, event: Event, operation: Operation
    ) -> Event:
        try:
            persisted = self._store.persist(uow, event)
        except UniqueViolation as exc:
            raise _conflict(operation, event.name) from exc
        except StoreError as exc:
            raise _database_error(
                operation, f"Failed to persist event with name {event.name}", exc
            ) from exc
        logger.debug("[%s] Persisted event with id %s", operation.value, persisted.id)
        return persisted
