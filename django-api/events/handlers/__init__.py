from events.handlers.views import (
    AdminEventListView,
    CalendarFeedView,
    EventCalendarView,
    EventDetailView,
    EventDuplicateView,
    EventListView,
)

__all__ = [
    "AdminEventListView",
    "CalendarFeedView",
    "EventCalendarView",
    "EventDetailView",
    "EventDuplicateView",
    "EventListView",
]
