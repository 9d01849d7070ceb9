"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from events.domain import (
    UNSET,
    DomainError,
    ErrorCode,
    EventId,
    EventPatch,
    Page,
    Sort,
    SortDirection,
)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = uuid.uuid4()
        assert EventId.from_string(str(raw)) == EventId(value=raw)

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")

    def test_str_is_the_uuid(self):
        raw = uuid.uuid4()
        assert str(EventId(value=raw)) == str(raw)


class TestPage:
    """Tests for Page value object."""

    def test_offset_is_index_times_size(self):
        assert Page.of(3, 10).offset == 30

    def test_first_page_starts_at_zero(self):
        assert Page.of(0, 25).offset == 0

    def test_rejects_negative_index(self):
        with pytest.raises(ValueError):
            Page.of(-1, 10)

    @pytest.mark.parametrize("size", [0, -5])
    def test_rejects_non_positive_size(self, size):
        with pytest.raises(ValueError):
            Page.of(0, size)


class TestSort:
    """Tests for Sort value object."""

    def test_defaults_to_ascending(self):
        sort = Sort.by("name")
        assert sort.direction is SortDirection.ASCENDING
        assert not sort.descending

    def test_descending(self):
        assert Sort.by("price", SortDirection.DESCENDING).descending


class TestEventMerge:
    """Tests for applying an EventPatch to an Event."""

    def test_only_present_fields_are_applied(self, make_event):
        event = make_event(id=EventId(value=uuid.uuid4()))
        patch = EventPatch(id=event.id, price=Decimal("42.00"))

        merged = event.merge(patch)

        assert merged.price == Decimal("42.00")
        assert merged.name == event.name
        assert merged.description == event.description
        assert merged.location == event.location
        assert merged.start_date == event.start_date
        assert merged.organizer_id == event.organizer_id

    def test_empty_string_is_a_value(self, make_event):
        """An empty description in the patch clears the description."""
        event = make_event(id=EventId(value=uuid.uuid4()))
        merged = event.merge(EventPatch(id=event.id, description="", location=""))
        assert merged.description == ""
        assert merged.location == ""

    def test_merge_keeps_identity_and_creator(self, make_event):
        event = make_event(id=EventId(value=uuid.uuid4()))
        merged = event.merge(EventPatch(id=event.id, name="Renamed"))
        assert merged.id == event.id
        assert merged.creator_id == event.creator_id
        assert merged.created_at == event.created_at

    def test_merge_returns_new_instance(self, make_event):
        event = make_event()
        merged = event.merge(EventPatch(id=EventId(value=uuid.uuid4()), name="Other"))
        assert event.name == "Conf A"
        assert merged.name == "Other"


class TestEventPatch:
    """Tests for EventPatch presence tracking."""

    def test_unset_by_default(self):
        patch = EventPatch(id=EventId(value=uuid.uuid4()))
        assert patch.present_fields() == {}
        assert patch.name is UNSET
        assert not patch.is_set("name")

    def test_present_fields_excludes_id(self):
        patch = EventPatch(id=EventId(value=uuid.uuid4()), name="X", location="")
        assert patch.present_fields() == {"name": "X", "location": ""}
        assert patch.is_set("location")

    def test_patch_is_immutable(self):
        patch = EventPatch(id=EventId(value=uuid.uuid4()))
        with pytest.raises(FrozenInstanceError):
            patch.name = "X"


class TestDomainError:
    """Tests for the error taxonomy."""

    def test_factories_set_code(self):
        assert DomainError.invalid_argument("m").code is ErrorCode.INVALID_ARGUMENT
        assert DomainError.not_found("m").code is ErrorCode.NOT_FOUND
        assert DomainError.conflict("m").code is ErrorCode.CONFLICT
        assert DomainError.database_error("m").code is ErrorCode.DATABASE_ERROR

    def test_str_includes_code_and_message(self):
        assert str(DomainError.not_found("gone")) == "NOT_FOUND: gone"

    def test_cause_is_the_chained_exception(self):
        original = RuntimeError("boom")
        with pytest.raises(DomainError) as excinfo:
            try:
                raise original
            except RuntimeError as exc:
                raise DomainError.database_error("failed") from exc
        assert excinfo.value.cause is original
