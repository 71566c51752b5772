import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.flags import Role
from apps.accounts.models import User
from apps.startups.models import Startup, Invite, InviteType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


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
def other_user(db):
    """Create and return another user without a startup."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        display_name='Other User',
    )


@pytest.fixture
def mentor(db):
    """Create and return a user holding the mentor role."""
    mentor = User.objects.create_user(
        email='mentor@example.com',
        password='MentorPass123!',
        display_name='Helpful Mentor',
    )
    mentor.roles.add(Role.MENTOR)
    mentor.save()
    return mentor


@pytest.fixture
def admin_user(db):
    """Create and return a staff user."""
    return User.objects.create_superuser(
        email='admin@example.com',
        password='AdminPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(other_user):
    """Return an API client authenticated as other_user."""
    client = APIClient()
    refresh = RefreshToken.for_user(other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def invite(db, user, other_user):
    """A pending mentor invite sent to other_user."""
    return Invite.objects.create(
        startup=user.startup,
        from_user=user,
        to=other_user,
        invite_type=InviteType.MENTOR,
        expires_at=timezone.now() + timedelta(days=7),
    )
