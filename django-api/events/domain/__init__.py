from events.domain.models import AgeGroup, Event, EventStatus, EventType
from events.domain.value_objects import EventId, Money

__all__ = [
    "Event",
    "EventType",
    "EventStatus",
    "AgeGroup",
    "EventId",
    "Money",
]
