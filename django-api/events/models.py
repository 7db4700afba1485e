"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    class EventType(models.TextChoices):
        MEETING = "meeting"
        CAMP = "camp"
        TRIP = "trip"
        SPECIAL = "special"
        FUNDRAISING = "fundraising"
        OTHER = "other"

    class Status(models.TextChoices):
        DRAFT = "draft"
        PUBLISHED = "published"
        CANCELLED = "cancelled"
        ARCHIVED = "archived"

    class AgeGroup(models.TextChoices):
        BEAVERS = "beavers"
        CUBS = "cubs"
        SCOUTS = "scouts"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    event_type = models.CharField(max_length=20, choices=EventType.choices)
    age_group = models.CharField(max_length=20, choices=AgeGroup.choices)
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    location = models.CharField(max_length=500)
    description = models.TextField()
    cost = models.DecimalField(max_digits=8, decimal_places=2, blank=True, null=True)
    what_to_bring = models.TextField(blank=True, null=True)
    rsvp_deadline = models.DateTimeField(blank=True, null=True)
    organizer_name = models.CharField(max_length=100, blank=True, null=True)
    organizer_contact = models.CharField(max_length=200, blank=True, null=True)
    is_recurring = models.BooleanField(default=False)
    recurrence_rule = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.DRAFT)
    cancellation_reason = models.TextField(blank=True, null=True)
    created_by = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["status", "starts_at"], name="event_status_start_idx"),
            models.Index(fields=["event_type", "starts_at"], name="event_type_start_idx"),
        ]

    def __str__(self) -> str:
        return self.title
