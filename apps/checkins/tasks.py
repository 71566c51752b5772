"""
Background jobs for checkin reminders.

``send_checkin_reminder`` is the unit of work: one email to one user. It
reloads the user on every run, so a retried or duplicated job sends at most
one more copy of the same reminder and never fails on stale data.
"""

import logging

from celery import shared_task

from .mail import send_checkin_reminder_email
from .windows import CheckinType

logger = logging.getLogger(__name__)


@shared_task(name='apps.checkins.tasks.send_checkin_reminder')
def send_checkin_reminder(kind: str, user_id: str) -> int:
    """Mail the 'before' or 'after' reminder to one user."""
    from apps.accounts.models import User

    try:
        checkin_type = CheckinType(kind)
    except ValueError:
        logger.error("Unknown checkin reminder kind %r for user %s", kind, user_id)
        return 0

    try:
        user = User.objects.select_related('startup').get(pk=user_id)
    except User.DoesNotExist:
        logger.warning("Skipping %s reminder: user %s no longer exists", checkin_type, user_id)
        return 0

    return send_checkin_reminder_email(user, checkin_type)


@shared_task(name='apps.checkins.tasks.send_before_checkin_emails')
def send_before_checkin_emails() -> int:
    from .services.reminders import send_before_checkin_email

    return send_before_checkin_email()


@shared_task(name='apps.checkins.tasks.send_after_checkin_emails')
def send_after_checkin_emails() -> int:
    from .services.reminders import send_after_checkin_email

    return send_after_checkin_email()
