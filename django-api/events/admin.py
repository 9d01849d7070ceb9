from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "price", "start_date", "end_date", "created_at"]
    search_fields = ["name", "location"]
    list_filter = ["start_date"]
    readonly_fields = ["id", "creator_id", "created_at", "updated_at"]
    ordering = ["name"]
