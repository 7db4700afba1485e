from django.urls import path

from events.handlers import (
    AdminEventListView,
    CalendarFeedView,
    EventCalendarView,
    EventDetailView,
    EventDuplicateView,
    EventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    # literal paths must come before the <event_id> catch-all
    path("events/calendar.ics", CalendarFeedView.as_view(), name="event-feed"),
    path("events/admin/all", AdminEventListView.as_view(), name="event-admin-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/calendar.ics",
        EventCalendarView.as_view(),
        name="event-calendar",
    ),
    path(
        "events/<str:event_id>/duplicate",
        EventDuplicateView.as_view(),
        name="event-duplicate",
    ),
]
