import pytest

from apps.accounts.models import User
from apps.checkins.models import Checkin
from apps.notifications.models import Notification, NotificationKind
from apps.startups.models import Startup


@pytest.mark.django_db
class TestNotification:

    def test_create_for_new_checkin(self):
        startup = Startup.objects.create(name='Rocket Labs', onboarded=True)
        user = User.objects.create_user(email='founder@example.com', password='TestPass123!', startup=startup)
        checkin = Checkin.objects.create(startup=startup, user=user)

        notification = Notification.create_for_new_checkin(checkin)

        assert Notification.objects.count() == 1
        assert notification.startup == startup
        assert notification.actor == user
        assert notification.kind == NotificationKind.NEW_CHECKIN
        assert notification.message.startswith('Rocket Labs completed their checkin for ')
        assert notification.read_at is None
