"""The Event aggregate and the sparse patch applied to it on update.

``Event`` is the persisted state. ``EventPatch`` carries caller input for a
partial update, with ``UNSET`` marking fields the caller left out. The column
limits below are shared with the ORM model in events/models.py.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from events.domain.value_objects import EventId

NAME_MAX_LENGTH = 100
LOCATION_MAX_LENGTH = 100
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class Unset(Enum):
    """Marker for a patch field the caller did not supply."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


@dataclass(frozen=True, kw_only=True)
class Event:
    """Domain representation of an Event."""

    id: EventId | None = None
    name: str
    description: str = ""
    price: Decimal
    location: str = ""
    start_date: datetime
    end_date: datetime
    organizer_id: UUID
    creator_id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def merge(self, patch: "EventPatch") -> "Event":
        """Return a copy with every field present in ``patch`` applied."""
        return replace(self, **patch.present_fields())


@dataclass(frozen=True, kw_only=True)
class EventPatch:
    """Sparse overlay applied to an existing Event.

    ``id`` names the target. Every other field is either a value or ``UNSET``;
    an empty string is a value.
    """

    id: EventId
    name: str | Unset = UNSET
    description: str | Unset = UNSET
    price: Decimal | Unset = UNSET
    location: str | Unset = UNSET
    start_date: datetime | Unset = UNSET
    end_date: datetime | Unset = UNSET
    organizer_id: UUID | Unset = UNSET

    def present_fields(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "id" and getattr(self, f.name) is not UNSET
        }

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET
