from zoneinfo import ZoneInfo

from django.apps import AppConfig
from django.conf import settings


def build_event_service():
    """Wire the event service from Django settings."""
    from events.domain.calendar_export import CalendarOptions
    from events.services.event_service import EventService, FeedWindow
    from events.stores.django_store import DjangoEventStore

    config = settings.EVENTS
    return EventService(
        store=DjangoEventStore(),
        calendar_options=CalendarOptions(
            name=config["CALENDAR_NAME"],
            description=config["CALENDAR_DESCRIPTION"],
            product_id=config["PRODUCT_ID"],
            feed_product_id=config["FEED_PRODUCT_ID"],
            timezone_name=settings.TIME_ZONE,
            uid_domain=config["UID_DOMAIN"],
        ),
        tz=ZoneInfo(settings.TIME_ZONE),
        feed_window=FeedWindow(
            past_days=config["FEED_PAST_DAYS"],
            future_days=config["FEED_FUTURE_DAYS"],
        ),
    )


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "events"

    def ready(self) -> None:
        from events import signals  # noqa: F401

        self.event_service = build_event_service()
