"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

from events.domain import (
    LOCATION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)

NAME_UNIQUE_CONSTRAINT = "events_event_name_unique"


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    location = models.CharField(max_length=LOCATION_MAX_LENGTH, blank=True, default="")
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    organizer_id = models.UUIDField()
    creator_id = models.UUIDField(default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["start_date"], name="events_event_start_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["name"], name=NAME_UNIQUE_CONSTRAINT),
            models.CheckConstraint(
                condition=models.Q(price__gt=0), name="events_event_price_positive"
            ),
        ]

    def __str__(self) -> str:
        return self.name
