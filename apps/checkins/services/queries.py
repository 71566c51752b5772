"""Read-side checkin lookups."""

from typing import Dict, Iterable, Optional
from uuid import UUID

from django.db.models import Q
from django.utils import timezone

from apps.checkins import windows
from apps.checkins.models import Checkin


def current_window_start(now):
    """
    Earliest creation time of a checkin that belongs to the current cycle.

    During the 'after' window that is the window's opening; otherwise it is
    the opening of the most recent 'after' window.
    """
    if windows.in_after_window(now):
        return windows.next_checkin_type_and_time(now).time - windows.WINDOW_LENGTH
    return windows.prev_after_checkin(now) - windows.WINDOW_LENGTH


def current_checkin_for_startups(startups: Iterable, *, now=None) -> Dict[UUID, Checkin]:
    """
    Current checkin of each startup.

    Args:
        startups: Startup instances
        now: Current time; defaults to the real clock

    Returns:
        Mapping of startup id to its most recent checkin of the current
        cycle. Startups without one are left out.
    """
    startup_ids = [startup.pk for startup in startups]
    if not startup_ids:
        return {}
    now = now or timezone.now()

    checkins = (
        Checkin.objects
        .filter(startup_id__in=startup_ids, created_at__gt=current_window_start(now))
        .order_by('created_at')
    )
    # Later rows overwrite earlier ones, leaving the newest per startup
    return {checkin.startup_id: checkin for checkin in checkins}


def current_checkin_for_startup(startup, *, now=None) -> Optional[Checkin]:
    return current_checkin_for_startups([startup], now=now).get(startup.pk)


def video_url_is_unique(url: str, *, exclude_id: Optional[UUID] = None) -> bool:
    """True if no other checkin already uses ``url`` for either video."""
    duplicates = Checkin.objects.filter(Q(start_video_url=url) | Q(end_video_url=url))
    if exclude_id is not None:
        duplicates = duplicates.exclude(pk=exclude_id)
    return not duplicates.exists()
