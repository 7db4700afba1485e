"""iCalendar (.ics) rendering for events.

Output imports cleanly into Google Calendar, Apple Calendar and Outlook.
Text values are escaped first and the finished property line is folded
afterwards; both steps are exposed as separate functions.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from events.domain.models import Event, EventStatus

logger = logging.getLogger(__name__)

CRLF = "\r\n"
MAX_LINE_LENGTH = 75

_REMINDERS = (
    ("-P7D", "Event in 1 week"),
    ("-P1D", "Event tomorrow"),
)


@dataclass(frozen=True)
class CalendarOptions:
    """Calendar-level metadata written into every exported document."""

    product_id: str = "-//Cubs Scout Group//Events//EN"
    feed_product_id: str = "-//Cubs Scout Group//Events Calendar//EN"
    name: str = "Cubs Scout Events"
    description: str = "All Cubs Scout Group events and activities"
    timezone_name: str = "Europe/London"
    uid_domain: str = "cubs-site"


def escape_text(text: str | None) -> str:
    """Escape a TEXT value. Backslash must go first."""
    if not text:
        return ""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\n")
        .replace("\n", "\\n")
    )


def fold_line(line: str) -> str:
    """Fold a content line at 75 characters, continuations indented by one space."""
    if len(line) <= MAX_LINE_LENGTH:
        return line

    folded = [line[:MAX_LINE_LENGTH]]
    remaining = line[MAX_LINE_LENGTH:]
    while remaining:
        folded.append(" " + remaining[: MAX_LINE_LENGTH - 1])
        remaining = remaining[MAX_LINE_LENGTH - 1 :]
    return CRLF.join(folded)


def format_timestamp(value: datetime) -> str:
    """Format an instant as ``YYYYMMDDTHHMMSSZ`` in UTC."""
    return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _text_property(name: str, value: str | None) -> str:
    return fold_line(f"{name}:{escape_text(value)}")


def _extended_description(event: Event) -> str:
    segments = [event.description or ""]

    if event.cost is not None and event.cost.amount > 0:
        segments.append(f"Cost: £{event.cost}")

    if event.what_to_bring:
        segments.append(f"What to bring: {event.what_to_bring}")

    if event.organizer_name:
        organizer = f"Organizer: {event.organizer_name}"
        if event.organizer_contact:
            organizer += f" ({event.organizer_contact})"
        segments.append(organizer)

    if event.rsvp_deadline is not None:
        segments.append(f"RSVP by: {event.rsvp_deadline.strftime('%d/%m/%Y')}")

    return "\n\n".join(segments)


def _vevent(event: Event, options: CalendarOptions, now: datetime, enrich: bool) -> list[str]:
    # Temporal fields are formatted before anything is emitted so a broken
    # record fails as a whole.
    stamps = {
        "DTSTAMP": format_timestamp(now),
        "CREATED": format_timestamp(event.created_at),
        "LAST-MODIFIED": format_timestamp(event.updated_at or event.created_at),
        "DTSTART": format_timestamp(event.starts_at),
        "DTEND": format_timestamp(event.ends_at),
    }

    lines = ["BEGIN:VEVENT", f"UID:{event.id}@{options.uid_domain}"]
    lines.extend(f"{name}:{value}" for name, value in stamps.items())

    if event.is_recurring and event.recurrence_rule and not event.is_occurrence:
        lines.append(f"RRULE:{event.recurrence_rule}")

    description = _extended_description(event) if enrich else event.description
    lines.append(_text_property("SUMMARY", event.title))
    lines.append(_text_property("DESCRIPTION", description))
    lines.append(_text_property("LOCATION", event.location))
    lines.append(f"CATEGORIES:{event.event_type.value.upper()}")

    status = "CANCELLED" if event.status is EventStatus.CANCELLED else "CONFIRMED"
    lines.append(f"STATUS:{status}")

    for trigger, label in _REMINDERS:
        lines.extend(
            [
                "BEGIN:VALARM",
                "ACTION:DISPLAY",
                f"TRIGGER:{trigger}",
                f"DESCRIPTION:{label}",
                "END:VALARM",
            ]
        )

    lines.append("END:VEVENT")
    return lines


def _safe_vevent(event: Event, options: CalendarOptions, now: datetime, enrich: bool) -> list[str]:
    try:
        return _vevent(event, options, now, enrich)
    except (AttributeError, TypeError, ValueError, OverflowError):
        logger.warning("Skipping event %s in calendar export", getattr(event, "id", None), exc_info=True)
        return []


def serialize_event(
    event: Event,
    options: CalendarOptions | None = None,
    now: datetime | None = None,
) -> str:
    """Render a single event, with organiser details and reminders."""
    options = options or CalendarOptions()
    now = now or datetime.now(timezone.utc)

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{options.product_id}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        fold_line(f"X-WR-CALNAME:{escape_text(options.name)}"),
        f"X-WR-TIMEZONE:{options.timezone_name}",
    ]
    lines.extend(_safe_vevent(event, options, now, enrich=True))
    lines.append("END:VCALENDAR")
    return CRLF.join(lines)


def serialize_feed(
    events: Iterable[Event],
    options: CalendarOptions | None = None,
    now: datetime | None = None,
) -> str:
    """Render a subscription feed. Callers filter the events beforehand."""
    options = options or CalendarOptions()
    now = now or datetime.now(timezone.utc)

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{options.feed_product_id}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        fold_line(f"X-WR-CALNAME:{escape_text(options.name)}"),
        fold_line(f"X-WR-CALDESC:{escape_text(options.description)}"),
        f"X-WR-TIMEZONE:{options.timezone_name}",
    ]
    for event in events:
        lines.extend(_safe_vevent(event, options, now, enrich=False))
    lines.append("END:VCALENDAR")
    return CRLF.join(lines)
