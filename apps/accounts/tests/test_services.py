"""
Service layer unit tests for accounts app.

Tests cover:
- Account type selection and reset
- Profile lookups (invites, mentor invitations)
- Chat account provisioning
"""

import pytest
from datetime import timedelta
from unittest.mock import patch
from django.utils import timezone

from apps.accounts.chat import ChatCredentials, LocalChatProvisioner
from apps.accounts.flags import Role, SetupStep
from apps.accounts.services import (
    ChatProvisioningError,
    InvalidRoleError,
    complete_welcome,
    generate_chat_account,
    get_current_invite,
    get_profile_context,
    reset_chat_account,
    update_account_type,
)
from apps.startups.models import Invite, InviteType


# =============================================================================
# Account Setup Service Tests
# =============================================================================

@pytest.mark.django_db
class TestUpdateAccountType:
    """Tests for account_setup.update_account_type."""

    def test_reset_removes_spectator_and_account_type_step(self, user):
        user.roles.add(Role.SPECTATOR)
        user.setup.add(SetupStep.ACCOUNT_TYPE)
        user.save()

        update_account_type(user=user, reset=True)

        user.refresh_from_db()
        assert Role.SPECTATOR not in user.roles
        assert SetupStep.ACCOUNT_TYPE not in user.setup
        assert Role.ENTREPRENEUR in user.roles

    def test_reset_without_flags_is_noop(self, user):
        """Reset succeeds even when neither flag was present."""
        update_account_type(user=user, reset=True)

        user.refresh_from_db()
        assert user.roles.to_list() == ['entrepreneur']
        assert len(user.setup) == 0

    def test_adding_role_twice_keeps_one(self, user):
        update_account_type(user=user, role='mentor')
        update_account_type(user=user, role='mentor')

        user.refresh_from_db()
        assert user.roles.to_list() == ['entrepreneur', 'mentor']
        assert SetupStep.ACCOUNT_TYPE in user.setup

    def test_reset_then_add_in_one_call(self, user):
        user.roles.add(Role.SPECTATOR)
        user.save()

        update_account_type(user=user, reset=True, role='investor')

        user.refresh_from_db()
        assert Role.SPECTATOR not in user.roles
        assert Role.INVESTOR in user.roles

    def test_admin_role_not_selectable(self, user):
        with pytest.raises(InvalidRoleError):
            update_account_type(user=user, role='admin')

        user.refresh_from_db()
        assert Role.ADMIN not in user.roles


@pytest.mark.django_db
class TestCompleteWelcome:

    def test_marks_setup_complete(self, user):
        complete_welcome(user=user)

        user.refresh_from_db()
        assert user.is_setup_complete


# =============================================================================
# Profile Service Tests
# =============================================================================

@pytest.mark.django_db
class TestProfileContext:
    """Tests for profiles.get_profile_context."""

    def test_own_profile_shows_active_invite(self, other_user, invite):
        context = get_profile_context(user=other_user, viewer=other_user)

        assert context['current_invite'] == invite
        assert context['can_invite_as_mentor'] is False

    def test_expired_invite_is_discarded(self, other_user, invite):
        invite.expires_at = timezone.now() - timedelta(minutes=1)
        invite.save()

        assert get_current_invite(user=other_user) is None

    def test_accepted_invite_is_ignored(self, other_user, invite):
        invite.accepted_at = timezone.now()
        invite.save()

        assert get_current_invite(user=other_user) is None

    def test_most_recent_invite_wins(self, user, other_user, invite):
        newer = Invite.objects.create(
            startup=user.startup,
            from_user=user,
            to=other_user,
            invite_type=InviteType.TEAM_MEMBER,
        )
        Invite.objects.filter(pk=invite.pk).update(created_at=timezone.now() - timedelta(days=1))

        assert get_current_invite(user=other_user) == newer

    def test_invite_to_someone_else_not_shown(self, user, invite):
        assert get_current_invite(user=user) is None

    def test_founder_can_invite_mentor(self, user, mentor):
        context = get_profile_context(user=mentor, viewer=user)

        assert context['can_invite_as_mentor'] is True
        assert context['current_invite'] is None

    def test_user_without_startup_cannot_invite_mentor(self, other_user, mentor):
        context = get_profile_context(user=mentor, viewer=other_user)

        assert context['can_invite_as_mentor'] is False

    def test_non_mentor_profile_has_no_invite_flag(self, user, other_user):
        context = get_profile_context(user=other_user, viewer=user)

        assert context['can_invite_as_mentor'] is False

    def test_capability_check_is_delegated_to_policy(self, user, mentor):
        with patch('apps.accounts.services.profiles.can_access', return_value=False) as mock_access:
            context = get_profile_context(user=mentor, viewer=user)

        assert context['can_invite_as_mentor'] is False
        mock_access.assert_called_once_with(user, user.startup, 'invite_mentor')


# =============================================================================
# Chat Account Service Tests
# =============================================================================

class FailingProvisioner(LocalChatProvisioner):

    def create_account(self, user):
        raise ChatProvisioningError("chat service down")


@pytest.mark.django_db
class TestChatAccounts:
    """Tests for chat_accounts services."""

    def test_generate_chat_account(self, user):
        generate_chat_account(user=user)

        user.refresh_from_db()
        assert user.has_chat_account
        assert user.hipchat_username.startswith('founder-')

    def test_reset_replaces_credentials(self, user):
        generate_chat_account(user=user)
        old_password = user.hipchat_password

        assert reset_chat_account(user=user) is True

        user.refresh_from_db()
        assert user.has_chat_account
        assert user.hipchat_password != old_password

    def test_reset_failure_returns_false_and_keeps_credentials(self, user):
        user.hipchat_username = 'founder'
        user.hipchat_password = 'old-secret'
        user.save()

        with patch('apps.accounts.chat.get_chat_provisioner', return_value=FailingProvisioner()):
            assert reset_chat_account(user=user) is False

        user.refresh_from_db()
        assert user.hipchat_password == 'old-secret'

    def test_reset_deletes_existing_account_first(self, user):
        user.hipchat_username = 'founder'
        user.hipchat_password = 'old-secret'
        user.save()

        provisioner = LocalChatProvisioner()
        with patch.object(provisioner, 'delete_account') as mock_delete, \
                patch.object(provisioner, 'create_account',
                             return_value=ChatCredentials('founder2', 'new-secret')), \
                patch('apps.accounts.chat.get_chat_provisioner', return_value=provisioner):
            assert reset_chat_account(user=user) is True

        mock_delete.assert_called_once_with(user)
        user.refresh_from_db()
        assert user.hipchat_username == 'founder2'
