import pytest
from rest_framework.test import APIClient
from apps.accounts.flags import Role
from apps.accounts.models import User
from apps.startups.models import Startup


@pytest.fixture(autouse=True)
def checkin_clock(settings):
    """Pin the checkin clock so window tests do not depend on deployment config."""
    settings.CHECKIN_TIME_ZONE = 'America/Los_Angeles'


@pytest.fixture
def freeze_time(monkeypatch):
    """Return a function that stops django.utils.timezone.now at the given instant."""
    def freeze(value):
        monkeypatch.setattr('django.utils.timezone.now', lambda: value)
        return value
    return freeze


@pytest.fixture
def startup(db):
    """Create and return an onboarded startup."""
    return Startup.objects.create(name='Rocket Labs', onboarded=True)


@pytest.fixture
def user(db, startup):
    """Create and return a founder on the test startup."""
    user = User.objects.create_user(
        email='founder@example.com',
        password='TestPass123!',
        display_name='Test Founder',
        startup=startup,
    )
    user.roles.add(Role.ENTREPRENEUR)
    user.save()
    return user


@pytest.fixture
def teammate(db, startup):
    """Create and return a second member of the test startup."""
    return User.objects.create_user(
        email='cofounder@example.com',
        password='TestPass123!',
        display_name='Co Founder',
        startup=startup,
    )


@pytest.fixture
def outsider(db):
    """Create and return a user without a startup."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def authenticated_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def outsider_client(outsider):
    client = APIClient()
    client.force_authenticate(user=outsider)
    return client


@pytest.fixture
def anonymous_client():
    return APIClient()
