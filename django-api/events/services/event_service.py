"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Callable

from events.domain import Event, EventId, EventStatus, EventType
from events.domain.calendar_export import CalendarOptions, serialize_event, serialize_feed
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidStatusError,
    InvalidTimeRangeError,
)
from events.domain.recurrence import expand_all
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

PUBLIC_STATUSES = (EventStatus.PUBLISHED, EventStatus.CANCELLED)


@dataclass(frozen=True)
class FeedWindow:
    """How far back and forward the subscription feed reaches."""

    past_days: int = 30
    future_days: int = 365


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _by_start(events: list[Event]) -> list[Event]:
    return sorted(events, key=lambda event: event.starts_at)


def parse_status(value: str) -> EventStatus:
    """Map a query-string status to EventStatus.

    Raises:
        InvalidStatusError: If the value is not a lifecycle status.
    """
    try:
        return EventStatus(value)
    except ValueError:
        raise InvalidStatusError(value) from None


class EventService:
    """Service for event catalog and calendar export operations."""

    def __init__(
        self,
        store: EventStore,
        calendar_options: CalendarOptions | None = None,
        tz: tzinfo = timezone.utc,
        feed_window: FeedWindow | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._store = store
        self._calendar_options = calendar_options or CalendarOptions()
        self._tz = tz
        self._feed_window = feed_window or FeedWindow()
        self._clock = clock

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidEventIdError() from None

    def list_published_events(self) -> list[Event]:
        """Return published events ordered by start."""
        return _by_start(self._store.list_events_by_status(EventStatus.PUBLISHED))

    def list_public_events(self) -> list[Event]:
        """Return published and cancelled events ordered by start.

        Cancelled events stay visible so people can see what was called off.
        """
        events: list[Event] = []
        for status in PUBLIC_STATUSES:
            events.extend(self._store.list_events_by_status(status))
        return _by_start(events)

    def list_published_events_expanded(self) -> list[Event]:
        return expand_all(self.list_published_events(), self._tz)

    def list_public_events_expanded(self) -> list[Event]:
        return expand_all(self.list_public_events(), self._tz)

    def list_events_by_status_raw(self, status: EventStatus) -> list[Event]:
        """Return stored events with a status, without expanding recurrences."""
        return self._store.list_events_by_status(status)

    def list_events_by_status(self, status: EventStatus) -> list[Event]:
        return expand_all(self._store.list_events_by_status(status), self._tz)

    def list_all_events(self) -> list[Event]:
        """Return every stored event regardless of status, unexpanded."""
        events: list[Event] = []
        for status in EventStatus:
            events.extend(self._store.list_events_by_status(status))
        return events

    def list_events_by_type(
        self, event_type: EventType, start: datetime, end: datetime
    ) -> list[Event]:
        return self._store.list_events_by_type(event_type, start, end)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(self._parse_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, data: dict[str, Any], created_by: str) -> Event:
        event = self._store.create_event({**data, "created_by": created_by})
        logger.info("Created event %s (%s)", event.id, event.status.value)
        return event

    def update_event(self, event_id: str, changes: dict[str, Any]) -> Event:
        """Apply a partial update.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidTimeRangeError: If the resulting event would not end after it starts.
        """
        current = self.get_event(event_id)
        starts_at = changes.get("starts_at", current.starts_at)
        ends_at = changes.get("ends_at", current.ends_at)
        if ends_at <= starts_at:
            raise InvalidTimeRangeError()

        event = self._store.update_event(self._parse_id(event_id), changes)
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s fields=%s", event.id, sorted(changes))
        return event

    def delete_event(self, event_id: str) -> None:
        parsed = self._parse_id(event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError(event_id)
        self._store.delete_event(parsed)
        logger.info("Deleted event %s", event_id)

    def duplicate_event(self, event_id: str) -> Event:
        """Copy an event under a new ID as a draft titled "Copy of ..."."""
        original = self.get_event(event_id)
        data = {
            "title": f"Copy of {original.title}",
            "event_type": original.event_type.value,
            "age_group": original.age_group.value,
            "starts_at": original.starts_at,
            "ends_at": original.ends_at,
            "location": original.location,
            "description": original.description,
            "cost": original.cost.amount if original.cost is not None else None,
            "what_to_bring": original.what_to_bring,
            "rsvp_deadline": original.rsvp_deadline,
            "organizer_name": original.organizer_name,
            "organizer_contact": original.organizer_contact,
            "is_recurring": original.is_recurring,
            "recurrence_rule": original.recurrence_rule,
            "status": EventStatus.DRAFT.value,
        }
        return self.create_event(data, created_by=original.created_by)

    def export_event(self, event_id: str) -> str:
        """Render one stored event (the master record) as iCalendar text."""
        event = self.get_event(event_id)
        return serialize_event(event, self._calendar_options, now=self._clock())

    def feed_events(self) -> list[Event]:
        """Public occurrences whose start falls inside the feed window."""
        now = self._clock()
        window_start = now - timedelta(days=self._feed_window.past_days)
        window_end = now + timedelta(days=self._feed_window.future_days)
        return [
            occurrence
            for occurrence in self.list_public_events_expanded()
            if window_start <= occurrence.starts_at <= window_end
        ]

    def export_feed(self) -> str:
        """Render the subscription feed as iCalendar text."""
        events = self.feed_events()
        logger.debug("Exporting feed with %d events", len(events))
        return serialize_feed(events, self._calendar_options, now=self._clock())
