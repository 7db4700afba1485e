from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "event_type", "status", "starts_at", "is_recurring"]
    list_filter = ["status", "event_type", "age_group", "is_recurring"]
    search_fields = ["title", "location"]
    ordering = ["-starts_at"]
