"""Django ORM implementation of the EventStore."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import InvalidOperation

from django.core.exceptions import FieldError
from django.db import DatabaseError, IntegrityError, transaction

from events import models
from events.domain import Event, EventId, Page, Sort
from events.stores.interfaces import EventStore, StoreError, UniqueViolation, UnitOfWork


def _is_name_violation(exc: IntegrityError) -> bool:
    # PostgreSQL reports the constraint name, SQLite reports table.column.
    message = str(exc)
    return (
        models.NAME_UNIQUE_CONSTRAINT in message
        or f"{models.Event._meta.db_table}.name" in message
    )


@contextmanager
def _translated_errors() -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        if _is_name_violation(exc):
            raise UniqueViolation(str(exc)) from exc
        raise StoreError(str(exc)) from exc
    except (DatabaseError, FieldError, InvalidOperation) as exc:
        raise StoreError(str(exc)) from exc


def _to_domain(record: models.Event) -> Event:
    return Event(
        id=EventId(value=record.id),
        name=record.name,
        description=record.description,
        price=record.price,
        location=record.location,
        start_date=record.start_date,
        end_date=record.end_date,
        organizer_id=record.organizer_id,
        creator_id=record.creator_id,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_record(event: Event) -> models.Event:
    record = models.Event(
        name=event.name,
        description=event.description,
        price=event.price,
        location=event.location,
        start_date=event.start_date,
        end_date=event.end_date,
        organizer_id=event.organizer_id,
        creator_id=event.creator_id,
    )
    if event.id is not None:
        record.id = event.id.value
        record.created_at = event.created_at
    return record


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    @contextmanager
    def unit_of_work(self) -> Iterator[UnitOfWork]:
        with _translated_errors(), transaction.atomic(using=self._using):
            yield UnitOfWork(using=self._using)

    def _events(self, uow: UnitOfWork):
        return models.Event.objects.using(uow.using)

    def find_page(self, uow: UnitOfWork, sort: Sort, page: Page) -> list[Event]:
        key = f"-{sort.field}" if sort.descending else sort.field
        with _translated_errors():
            records = self._events(uow).order_by(key, "id")[
                page.offset : page.offset + page.size
            ]
            return [_to_domain(record) for record in records]

    def find_by_id(self, uow: UnitOfWork, event_id: EventId) -> Event | None:
        with _translated_errors():
            record = self._events(uow).filter(pk=event_id.value).first()
        return _to_domain(record) if record is not None else None

    def find_by_name(self, uow: UnitOfWork, name: str) -> Event | None:
        with _translated_errors():
            record = self._events(uow).filter(name=name).first()
        return _to_domain(record) if record is not None else None

    def persist(self, uow: UnitOfWork, event: Event) -> Event:
        record = _to_record(event)
        with _translated_errors():
            if event.id is None:
                record.save(using=uow.using, force_insert=True)
            else:
                record.save(using=uow.using, force_update=True)
            # Return the values as stored, after column rounding.
            record.refresh_from_db(using=uow.using)
        return _to_domain(record)

    def delete(self, uow: UnitOfWork, event: Event) -> None:
        with _translated_errors():
            self._events(uow).filter(pk=event.id.value).delete()
