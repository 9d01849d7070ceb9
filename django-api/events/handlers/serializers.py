"""Serializers for transforming domain models to API responses and back."""

from django.conf import settings
from rest_framework import serializers

from events.domain import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    SORTABLE_FIELDS,
    Event,
    EventId,
    EventPatch,
    Page,
    Sort,
    SortDirection,
)


class EventSummarySerializer(serializers.Serializer):
    """Listing projection of the Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    location = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()


class EventDetailSerializer(EventSummarySerializer):
    """Full projection of the Event domain model."""

    organizer_id = serializers.UUIDField()
    creator_id = serializers.UUIDField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class EventCreateSerializer(serializers.Serializer):
    """Decodes a create request into a candidate Event."""

    name = serializers.CharField(trim_whitespace=False)
    description = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, default=""
    )
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    location = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, default=""
    )
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    organizer_id = serializers.UUIDField()

    def to_domain(self) -> Event:
        return Event(**self.validated_data)


class EventPatchSerializer(serializers.Serializer):
    """Decodes a partial update; keys missing from the body stay UNSET."""

    name = serializers.CharField(required=False, trim_whitespace=False)
    description = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False
    )
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES, required=False
    )
    location = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False
    )
    start_date = serializers.DateTimeField(required=False)
    end_date = serializers.DateTimeField(required=False)
    organizer_id = serializers.UUIDField(required=False)

    def to_domain(self, event_id: EventId) -> EventPatch:
        return EventPatch(id=event_id, **self.validated_data)


class ListEventsQuerySerializer(serializers.Serializer):
    """Pagination and sort query parameters with caller-facing defaults."""

    page = serializers.IntegerField(min_value=0, default=0)
    size = serializers.IntegerField(
        min_value=1, default=lambda: settings.EVENTS_DEFAULT_PAGE_SIZE
    )
    sort = serializers.ChoiceField(
        choices=SORTABLE_FIELDS, default=lambda: settings.EVENTS_DEFAULT_SORT_FIELD
    )
    order = serializers.ChoiceField(
        choices=[direction.value for direction in SortDirection],
        default=SortDirection.ASCENDING.value,
    )

    def to_page(self) -> Page:
        return Page.of(self.validated_data["page"], self.validated_data["size"])

    def to_sort(self) -> Sort:
        return Sort.by(
            self.validated_data["sort"], SortDirection(self.validated_data["order"])
        )
