from events.domain.errors import DomainError, ErrorCode
from events.domain.models import (
    LOCATION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    UNSET,
    Event,
    EventPatch,
    Unset,
)
from events.domain.value_objects import (
    SORTABLE_FIELDS,
    EventId,
    Page,
    Sort,
    SortDirection,
)

__all__ = [
    "Event",
    "EventPatch",
    "UNSET",
    "Unset",
    "NAME_MAX_LENGTH",
    "LOCATION_MAX_LENGTH",
    "PRICE_MAX_DIGITS",
    "PRICE_DECIMAL_PLACES",
    "EventId",
    "Page",
    "Sort",
    "SortDirection",
    "SORTABLE_FIELDS",
    "DomainError",
    "ErrorCode",
]
