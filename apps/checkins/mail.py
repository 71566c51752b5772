"""Checkin reminder emails."""

from django.conf import settings
from django.core.mail import send_mail

from .windows import CheckinType

SUBJECTS = {
    CheckinType.BEFORE: "Time to check in: what's your focus this week?",
    CheckinType.AFTER: "Time to check in: how did last week go?",
}

BODIES = {
    CheckinType.BEFORE: (
        "Hi {name},\n\n"
        "The 'before' checkin for {startup} is open until Wednesday 4pm.\n"
        "Tell the community what you are focusing on this week and why, "
        "and record a short video.\n\n"
        "{url}\n"
    ),
    CheckinType.AFTER: (
        "Hi {name},\n\n"
        "The 'after' checkin for {startup} is open until Tuesday 4pm.\n"
        "Record a short video about how last week went.\n\n"
        "{url}\n"
    ),
}


def send_checkin_reminder_email(user, kind) -> int:
    """Send one reminder; returns the number of messages delivered (0 or 1)."""
    kind = CheckinType(kind)
    body = BODIES[kind].format(
        name=user.get_display_name(),
        startup=user.startup.name if user.startup else 'your startup',
        url=f"{settings.SITE_URL.rstrip('/')}/checkins",
    )
    return send_mail(
        subject=SUBJECTS[kind],
        message=body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
    )
