"""
Event lifecycle app.

This app:
- Owns the Event table and its constraints
- Exposes list, detail, create, update and delete over REST

This app does NOT:
- Check that an organizer exists
- Cache events between requests
"""

from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
    verbose_name = "Events"
