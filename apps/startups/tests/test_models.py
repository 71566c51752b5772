from datetime import timedelta

import pytest
from django.utils import timezone

from apps.accounts.models import User
from apps.startups.models import Invite, Startup


@pytest.mark.django_db
class TestInvite:

    def test_is_active(self):
        startup = Startup.objects.create(name='Rocket Labs')
        invitee = User.objects.create_user(email='invitee@example.com', password='TestPass123!')
        now = timezone.now()
        invite = Invite.objects.create(startup=startup, to=invitee, expires_at=now + timedelta(days=1))

        assert invite.is_active(now)
        assert not invite.is_active(now + timedelta(days=2))

        invite.accepted_at = now
        assert not invite.is_active(now)

    def test_without_expiry_stays_active(self):
        invite = Invite.objects.create(startup=Startup.objects.create(name='Rocket Labs'))

        assert invite.is_active()
        assert Invite.objects.not_accepted().count() == 1

    def test_onboarded_queryset(self):
        Startup.objects.create(name='Ready', onboarded=True)
        Startup.objects.create(name='Not yet')

        assert [s.name for s in Startup.objects.onboarded()] == ['Ready']
