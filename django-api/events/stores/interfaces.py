"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from events.domain import Event, EventId, EventStatus, EventType


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events_by_status(self, status: EventStatus) -> list[Event]:
        """Return events with the given status, ordered by starts_at ascending."""
        ...

    @abstractmethod
    def list_events_by_type(
        self, event_type: EventType, start: datetime, end: datetime
    ) -> list[Event]:
        """Return events of a type starting within [start, end]."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(self, data: dict[str, Any]) -> Event:
        """Persist a new event and return it."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: dict[str, Any]) -> Event | None:
        """Apply changes to an event, or return None if it does not exist."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Delete an event. Deleting a missing event is a no-op."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...
