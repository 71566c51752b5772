"""
Checkin reminder fan-out.

Queues one reminder job per eligible user. The jobs themselves live in
``apps.checkins.tasks`` and run on the Celery workers.
"""

import logging

from django.db.models import Q

from apps.accounts.flags import EmailPreference
from apps.accounts.models import User
from apps.checkins.tasks import send_checkin_reminder
from apps.checkins.windows import CheckinType

logger = logging.getLogger(__name__)


def reminder_recipients():
    """
    Users on onboarded startups who want checkin reminders.

    The preference lives in a JSON list, so it is checked in Python rather
    than in the query.
    """
    users = (
        User.objects
        .filter(is_active=True, startup__onboarded=True)
        .exclude(Q(email__isnull=True) | Q(email=''))
        .select_related('startup')
    )
    return [user for user in users if user.email_for(EmailPreference.DOCHECKIN)]


def schedule_reminder(kind: CheckinType, user_id) -> None:
    """Queue one reminder; returns as soon as the job is handed to the broker."""
    send_checkin_reminder.delay(CheckinType(kind).value, str(user_id))


def _send_checkin_emails(kind: CheckinType) -> int:
    recipients = reminder_recipients()
    for user in recipients:
        schedule_reminder(kind, user.pk)
    logger.info("Queued %d '%s' checkin reminder(s)", len(recipients), kind)
    return len(recipients)


def send_before_checkin_email() -> int:
    """Queue the 'before' reminder for every eligible user."""
    return _send_checkin_emails(CheckinType.BEFORE)


def send_after_checkin_email() -> int:
    """Queue the 'after' reminder for every eligible user."""
    return _send_checkin_emails(CheckinType.AFTER)
