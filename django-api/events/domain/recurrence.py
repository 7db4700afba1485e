"""Recurring event expansion.

Only a narrow RRULE subset is honoured: ``FREQ=DAILY|WEEKLY|MONTHLY`` bounded
by ``UNTIL=YYYYMMDD``. Anything else degrades to the single stored event.
Stepping happens on civil dates in the calendar time zone so that every
occurrence keeps the master's wall-clock start time.
"""

import logging
import re
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone, tzinfo
from enum import Enum
from itertools import chain
from typing import Iterable

from dateutil.relativedelta import relativedelta

from events.domain.models import Event

logger = logging.getLogger(__name__)

MAX_OCCURRENCES = 1000

_UNTIL_PATTERN = re.compile(r"^(\d{4})(\d{2})(\d{2})(T\d{6}Z?)?$")


class Frequency(Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


@dataclass(frozen=True)
class SupportedRule:
    """A rule the expander knows how to step through."""

    freq: Frequency
    until: date


@dataclass(frozen=True)
class UnsupportedRule:
    """A rule that is stored verbatim but never expanded."""

    reason: str


RecurrenceRule = SupportedRule | UnsupportedRule


def parse_rule(text: str | None) -> RecurrenceRule:
    """Parse ``FREQ=...;UNTIL=...`` into a tagged result. Never raises."""
    if not text:
        return UnsupportedRule("empty rule")

    parts: dict[str, str] = {}
    for chunk in text.strip().removeprefix("RRULE:").split(";"):
        key, sep, value = chunk.partition("=")
        if sep:
            parts[key.strip().upper()] = value.strip()

    try:
        freq = Frequency(parts.get("FREQ", "").upper())
    except ValueError:
        return UnsupportedRule(f"unsupported FREQ {parts.get('FREQ')!r}")

    match = _UNTIL_PATTERN.match(parts.get("UNTIL", ""))
    if match is None:
        return UnsupportedRule("missing or malformed UNTIL")
    year, month, day = (int(group) for group in match.groups()[:3])
    try:
        until = date(year, month, day)
    except ValueError:
        return UnsupportedRule(f"invalid UNTIL date {parts['UNTIL']!r}")

    return SupportedRule(freq=freq, until=until)


def _step(anchor: date, freq: Frequency, index: int) -> date:
    # Offsets are taken from the anchor so a day-of-month clamped in a short
    # month does not carry into later months.
    if freq is Frequency.DAILY:
        return anchor + timedelta(days=index)
    if freq is Frequency.WEEKLY:
        return anchor + timedelta(weeks=index)
    return anchor + relativedelta(months=index)


def expand(
    event: Event,
    tz: tzinfo = timezone.utc,
    limit: int = MAX_OCCURRENCES,
) -> list[Event]:
    """Expand one stored event into its concrete occurrences.

    Non-recurring events and events whose rule is not supported come back
    unchanged as a one-element list. Occurrence instants are returned in UTC.
    """
    if not event.is_recurring or not event.recurrence_rule:
        return [event]

    rule = parse_rule(event.recurrence_rule)
    if isinstance(rule, UnsupportedRule):
        logger.debug("Not expanding event %s: %s", event.id, rule.reason)
        return [event]

    try:
        local_start = event.starts_at.astimezone(tz)
        duration = event.ends_at.astimezone(timezone.utc) - event.starts_at.astimezone(
            timezone.utc
        )
    except (AttributeError, TypeError, ValueError, OverflowError):
        logger.warning("Not expanding event %s: unusable start/end", event.id)
        return [event]

    anchor = local_start.date()
    wall_time = local_start.time()
    occurrences: list[Event] = []

    for index in range(limit):
        try:
            day = _step(anchor, rule.freq, index)
            starts_at = datetime.combine(day, wall_time, tzinfo=tz).astimezone(timezone.utc)
            ends_at = starts_at + duration
        except (OverflowError, ValueError):
            break
        if day > rule.until:
            break
        occurrences.append(
            replace(
                event,
                id=f"{event.id}_{day.isoformat()}",
                starts_at=starts_at,
                ends_at=ends_at,
                series_id=event.id,
            )
        )
    else:
        logger.info("Event %s hit the %d occurrence ceiling", event.id, limit)

    if not occurrences:
        logger.debug("Event %s has UNTIL before its start, keeping master", event.id)
        return [event]
    return occurrences


def expand_all(events: Iterable[Event], tz: tzinfo = timezone.utc) -> list[Event]:
    """Expand every event and order the combined result by start time."""
    return sorted(
        chain.from_iterable(expand(event, tz) for event in events),
        key=lambda occurrence: occurrence.starts_at,
    )
