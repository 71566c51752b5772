"""
Weekly checkin time windows.

Every week has two 24 hour windows on the checkin clock
(``settings.CHECKIN_TIME_ZONE``):

    after  window: Monday 16:00  -> Tuesday 16:00   (report last week)
    before window: Tuesday 16:00 -> Wednesday 16:00 (plan this week)

``next_after_checkin`` and ``next_before_checkin`` return the instant the
next window of that kind closes; a window is open during the 24 hours
before that instant.

Everything here is a pure function of the ``now`` passed in, so callers
decide where the clock comes from. Returned datetimes are aware and in the
checkin time zone.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from django.conf import settings
from django.db import models
from django.utils import timezone

WINDOW_LENGTH = timedelta(hours=24)
CHECKIN_HOUR = 16

MONDAY, TUESDAY, WEDNESDAY = 0, 1, 2


class CheckinType(models.TextChoices):
    BEFORE = 'before', 'Before'
    AFTER = 'after', 'After'


@dataclass(frozen=True)
class NextCheckin:
    type: CheckinType
    time: datetime


def checkin_timezone():
    return ZoneInfo(settings.CHECKIN_TIME_ZONE)


def to_local(value: datetime) -> datetime:
    """Express an instant on the checkin clock."""
    if timezone.is_naive(value):
        raise ValueError("Checkin windows need an aware datetime")
    return value.astimezone(checkin_timezone())


def _at(day: datetime, days: int, hour: int = CHECKIN_HOUR) -> datetime:
    """Wall-clock ``hour`` on the day ``days`` after ``day``'s date."""
    date = day.date() + timedelta(days=days)
    return datetime(date.year, date.month, date.day, hour, tzinfo=day.tzinfo)


def beginning_of_week(now: datetime) -> datetime:
    """Monday 00:00 of the week containing ``now``."""
    local = to_local(now)
    return _at(local, -local.weekday(), hour=0)


def next_after_checkin(now: datetime) -> datetime:
    """Close of the next 'after' window: Tuesday 16:00."""
    local = to_local(now)
    week_start = beginning_of_week(local)
    day = local.weekday()
    if day == MONDAY or (day == TUESDAY and local.hour < CHECKIN_HOUR):
        return _at(week_start, TUESDAY)
    return _at(week_start, 7 + TUESDAY)


def next_before_checkin(now: datetime) -> datetime:
    """Close of the next 'before' window: Wednesday 16:00."""
    local = to_local(now)
    week_start = beginning_of_week(local)
    day = local.weekday()
    if day in (MONDAY, TUESDAY) or (day == WEDNESDAY and local.hour < CHECKIN_HOUR):
        return _at(week_start, WEDNESDAY)
    return _at(week_start, 7 + WEDNESDAY)


def prev_after_checkin(now: datetime) -> datetime:
    return _at(next_after_checkin(now), -7)


def prev_before_checkin(now: datetime) -> datetime:
    return _at(next_before_checkin(now), -7)


def _in_window(now: datetime, closes_at: datetime) -> bool:
    return closes_at - WINDOW_LENGTH <= now < closes_at


def in_before_window(now: datetime) -> bool:
    """True while startups can submit the 'before' part (Tue 16:00 - Wed 16:00)."""
    return _in_window(to_local(now), next_before_checkin(now))


def in_after_window(now: datetime) -> bool:
    """True while startups can submit the 'after' part (Mon 16:00 - Tue 16:00)."""
    return _in_window(to_local(now), next_after_checkin(now))


def in_a_checkin_window(now: datetime) -> bool:
    return in_before_window(now) or in_after_window(now)


def next_checkin_type_and_time(now: datetime) -> NextCheckin:
    """Whichever window closes first decides which fields are due."""
    before = next_before_checkin(now)
    after = next_after_checkin(now)
    if before < after:
        return NextCheckin(type=CheckinType.BEFORE, time=before)
    return NextCheckin(type=CheckinType.AFTER, time=after)


def week_start_for_time(value: datetime) -> datetime:
    """The Tuesday 16:00 at or before ``value`` that opens its checkin week."""
    local = to_local(value)
    start = _at(local, TUESDAY - local.weekday())
    if start > local:
        start = _at(start, -7)
    return start


def week_for_time(value: datetime) -> str:
    """
    Label for the checkin week containing ``value``.

    Weeks run from Tuesday 16:00 to the next Tuesday 16:00 and are labelled
    Tuesday to Monday, e.g. 'Jul 3-Jul 9'.
    """
    start = week_start_for_time(value)
    end = start + timedelta(days=6)
    return f"{start:%b} {start.day}-{end:%b} {end.day}"
