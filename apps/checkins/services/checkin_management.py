"""
Checkin validation and submission.

Which fields are required depends on the checkin window open at the moment
of saving: the same half-filled checkin is valid on Thursday and invalid on
Tuesday evening.
"""

import logging

from django.db import transaction
from django.utils import timezone

from apps.checkins import video, windows
from apps.checkins.models import Checkin
from apps.notifications.models import Notification

from .exceptions import CheckinValidationError

logger = logging.getLogger(__name__)

BLANK = "can't be blank"
INVALID_VIDEO = 'invalid Youtube URL'


def _blank(value):
    return not (value or '').strip()


def validate_checkin(checkin: Checkin, *, now) -> dict:
    """
    Collect field errors for a checkin at time ``now``.

    Returns:
        Mapping of field name to list of messages; empty when valid
    """
    errors = {}

    def add(field, message):
        errors.setdefault(field, []).append(message)

    if checkin.startup_id is None:
        add('startup', BLANK)

    if windows.in_before_window(now):
        if _blank(checkin.start_focus):
            add('start_focus', BLANK)
        if _blank(checkin.start_video_url):
            add('start_video_url', BLANK)

    if windows.in_after_window(now):
        if _blank(checkin.end_video_url):
            add('end_video_url', BLANK)

    for field in ('start_video_url', 'end_video_url'):
        url = getattr(checkin, field)
        if not _blank(url) and not video.is_valid_url(url):
            add(field, INVALID_VIDEO)

    return errors


def stamp_progress(checkin: Checkin, *, now) -> None:
    """Record when each part was first completed; never overwrite."""
    if not checkin.submitted and checkin.before_completed:
        checkin.submitted_at = now
    if not checkin.completed and checkin.after_completed:
        checkin.completed_at = now


@transaction.atomic
def save_checkin(checkin: Checkin, *, now=None) -> Checkin:
    """
    Validate and persist a checkin.

    On the save that first completes the 'after' part a notification is
    created for the startup; later saves never create another.

    Args:
        checkin: New or changed Checkin instance
        now: Current time; defaults to the real clock

    Returns:
        Saved Checkin instance

    Raises:
        CheckinValidationError: If required fields for the open window are
            blank or a video URL is not a YouTube link. Nothing is saved.
    """
    now = now or timezone.now()

    errors = validate_checkin(checkin, now=now)
    if errors:
        raise CheckinValidationError(errors)

    was_completed = checkin.completed
    stamp_progress(checkin, now=now)
    checkin.save()

    if checkin.completed and not was_completed:
        Notification.create_for_new_checkin(checkin)
        logger.info("Checkin %s completed for startup %s", checkin.pk, checkin.startup_id)

    return checkin


def create_checkin(*, startup, user, data: dict, now=None) -> Checkin:
    """Build a checkin for ``startup`` from submitted fields and save it."""
    checkin = Checkin(startup=startup, user=user, **data)
    return save_checkin(checkin, now=now)


def update_checkin(*, checkin: Checkin, data: dict, now=None) -> Checkin:
    """Apply submitted fields to an existing checkin and save it."""
    for field, value in data.items():
        setattr(checkin, field, value)
    return save_checkin(checkin, now=now)
