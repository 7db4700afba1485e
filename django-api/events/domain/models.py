"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from events.domain.value_objects import Money


class EventType(Enum):
    MEETING = "meeting"
    CAMP = "camp"
    TRIP = "trip"
    SPECIAL = "special"
    FUNDRAISING = "fundraising"
    OTHER = "other"


class EventStatus(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    ARCHIVED = "archived"


class AgeGroup(Enum):
    BEAVERS = "beavers"
    CUBS = "cubs"
    SCOUTS = "scouts"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    An expanded occurrence is an Event too: its ``id`` carries the
    occurrence date and ``series_id`` points back at the master record.
    """

    id: str
    title: str
    event_type: EventType
    age_group: AgeGroup
    starts_at: datetime
    ends_at: datetime
    location: str
    description: str
    status: EventStatus
    created_by: str
    created_at: datetime
    updated_at: datetime | None = None
    cost: Money | None = None
    what_to_bring: str | None = None
    rsvp_deadline: datetime | None = None
    organizer_name: str | None = None
    organizer_contact: str | None = None
    is_recurring: bool = False
    recurrence_rule: str | None = None
    cancellation_reason: str | None = None
    series_id: str | None = None

    @property
    def is_occurrence(self) -> bool:
        return self.series_id is not None
