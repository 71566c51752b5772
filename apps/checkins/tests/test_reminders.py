"""
Tests for checkin reminder fan-out and the reminder jobs.

Celery runs eagerly under pytest, so ``.delay`` executes the job inline.
"""

from unittest.mock import call, patch

import pytest

from apps.accounts.flags import EmailPreference
from apps.accounts.models import User
from apps.checkins.services import (
    reminder_recipients,
    send_after_checkin_email,
    send_before_checkin_email,
)
from apps.checkins.tasks import (
    send_after_checkin_emails,
    send_before_checkin_emails,
    send_checkin_reminder,
)
from apps.startups.models import Startup


@pytest.fixture
def not_onboarded(db):
    startup = Startup.objects.create(name='Stealth Co', onboarded=False)
    return User.objects.create_user(email='stealth@example.com', password='TestPass123!', startup=startup)


@pytest.fixture
def opted_out(db, startup):
    user = User.objects.create_user(email='quiet@example.com', password='TestPass123!', startup=startup)
    user.email_on.remove(EmailPreference.DOCHECKIN)
    user.save()
    return user


@pytest.mark.django_db
class TestReminderRecipients:

    def test_only_opted_in_members_of_onboarded_startups(
        self, user, teammate, outsider, not_onboarded, opted_out
    ):
        recipients = reminder_recipients()

        assert {u.email for u in recipients} == {user.email, teammate.email}

    def test_inactive_users_skipped(self, user, teammate):
        teammate.is_active = False
        teammate.save()

        assert reminder_recipients() == [user]


@pytest.mark.django_db
class TestScheduleReminders:
    """The fan-out queues one job per recipient and does not send anything itself."""

    def test_before_reminders_queued(self, user, teammate):
        with patch('apps.checkins.services.reminders.send_checkin_reminder') as mock_task:
            count = send_before_checkin_email()

        assert count == 2
        assert mock_task.delay.call_count == 2
        mock_task.delay.assert_has_calls(
            [call('before', str(user.pk)), call('before', str(teammate.pk))],
            any_order=True,
        )

    def test_after_reminders_queued(self, user):
        with patch('apps.checkins.services.reminders.send_checkin_reminder') as mock_task:
            count = send_after_checkin_email()

        assert count == 1
        mock_task.delay.assert_called_once_with('after', str(user.pk))

    def test_no_recipients(self, outsider):
        with patch('apps.checkins.services.reminders.send_checkin_reminder') as mock_task:
            assert send_before_checkin_email() == 0

        mock_task.delay.assert_not_called()


@pytest.mark.django_db
class TestReminderJobs:

    def test_sends_one_email(self, user, mailoutbox):
        sent = send_checkin_reminder('before', str(user.pk))

        assert sent == 1
        assert len(mailoutbox) == 1
        message = mailoutbox[0]
        assert message.to == [user.email]
        assert 'focus' in message.subject
        assert 'Rocket Labs' in message.body

    def test_missing_user_is_skipped(self, db, mailoutbox):
        sent = send_checkin_reminder('after', '00000000-0000-0000-0000-000000000000')

        assert sent == 0
        assert mailoutbox == []

    def test_unknown_kind_is_skipped(self, user, mailoutbox):
        assert send_checkin_reminder('sideways', str(user.pk)) == 0
        assert mailoutbox == []

    def test_scheduled_jobs_send_to_every_recipient(self, user, teammate, opted_out, mailoutbox):
        assert send_after_checkin_emails() == 2

        assert sorted(m.to[0] for m in mailoutbox) == sorted([user.email, teammate.email])
        assert all('last week' in m.subject for m in mailoutbox)

    def test_before_job(self, user, mailoutbox):
        assert send_before_checkin_emails.delay().get() == 1
        assert len(mailoutbox) == 1
