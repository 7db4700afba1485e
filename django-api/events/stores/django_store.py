"""Django ORM implementation of the EventStore."""

from datetime import datetime
from typing import Any

from events import models
from events.domain import AgeGroup, Event, EventId, EventStatus, EventType, Money
from events.stores.interfaces import EventStore


def to_domain(row: models.Event) -> Event:
    """Convert an ORM row into a domain Event."""
    return Event(
        id=str(row.id),
        title=row.title,
        event_type=EventType(row.event_type),
        age_group=AgeGroup(row.age_group),
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        location=row.location,
        description=row.description,
        status=EventStatus(row.status),
        created_by=row.created_by,
        created_at=row.created_at,
        updated_at=row.updated_at,
        cost=Money(row.cost) if row.cost is not None else None,
        what_to_bring=row.what_to_bring or None,
        rsvp_deadline=row.rsvp_deadline,
        organizer_name=row.organizer_name or None,
        organizer_contact=row.organizer_contact or None,
        is_recurring=row.is_recurring,
        recurrence_rule=row.recurrence_rule or None,
        cancellation_reason=row.cancellation_reason or None,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events_by_status(self, status: EventStatus) -> list[Event]:
        rows = models.Event.objects.filter(status=status.value).order_by("starts_at")
        return [to_domain(row) for row in rows]

    def list_events_by_type(
        self, event_type: EventType, start: datetime, end: datetime
    ) -> list[Event]:
        rows = models.Event.objects.filter(
            event_type=event_type.value,
            starts_at__gte=start,
            starts_at__lte=end,
        ).order_by("starts_at")
        return [to_domain(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_domain(row) if row is not None else None

    def create_event(self, data: dict[str, Any]) -> Event:
        row = models.Event.objects.create(**data)
        return to_domain(row)

    def update_event(self, event_id: EventId, changes: dict[str, Any]) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, field, value)
        # save() rather than queryset.update() so post_save fires for cache invalidation
        row.save()
        return to_domain(row)

    def delete_event(self, event_id: EventId) -> None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is not None:
            row.delete()

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()
