"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID

SORTABLE_FIELDS = (
    "name",
    "price",
    "location",
    "start_date",
    "end_date",
    "created_at",
    "updated_at",
)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class Sort:
    """Ordering of a listing: one field and a direction."""

    field: str
    direction: SortDirection = SortDirection.ASCENDING

    @classmethod
    def by(cls, field: str, direction: SortDirection = SortDirection.ASCENDING) -> Self:
        return cls(field=field, direction=direction)

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING


@dataclass(frozen=True)
class Page:
    """Zero-based page index and a positive page size."""

    index: int
    size: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Page index cannot be negative")
        if self.size <= 0:
            raise ValueError("Page size must be positive")

    @classmethod
    def of(cls, index: int, size: int) -> Self:
        return cls(index=index, size=size)

    @property
    def offset(self) -> int:
        return self.index * self.size
