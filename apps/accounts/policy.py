"""
Access policy collaborator.

Views and services never embed authorization rules; they ask the policy
configured in ``settings.ACCESS_POLICY`` through ``can_access``.
"""

from functools import lru_cache

from django.conf import settings
from django.db import models
from django.utils.module_loading import import_string
from rest_framework.permissions import BasePermission


class Action(models.TextChoices):
    SHOW = 'show', 'Show'
    EDIT = 'edit', 'Edit'
    UPDATE = 'update', 'Update'
    CHAT = 'chat', 'Chat'
    RESET_CHAT = 'reset_chat', 'Reset chat account'
    INVITE_MENTOR = 'invite_mentor', 'Invite mentor'
    DELETE = 'delete', 'Delete'


class AccessPolicy:
    """Interface for authorization policies."""

    def can_access(self, actor, resource, action) -> bool:
        raise NotImplementedError


class DefaultAccessPolicy(AccessPolicy):
    """
    Rules for the community site.

    - Admins may do anything.
    - Any signed-in user may view a profile.
    - Only the owner may edit their account or touch their chat account.
    - Startup members may invite mentors to their startup and see or
      change its checkins.
    - Comments are visible with their checkin; only the author may delete one.
    """

    def can_access(self, actor, resource, action) -> bool:
        # Imported here to keep the policy importable before apps are ready
        from apps.accounts.models import User
        from apps.checkins.models import Checkin, CheckinComment
        from apps.startups.models import Startup

        if actor is None or not actor.is_authenticated:
            return False
        if actor.is_admin:
            return True

        if isinstance(resource, User):
            if action == Action.SHOW:
                return True
            return resource.pk == actor.pk

        if isinstance(resource, Startup):
            if action == Action.INVITE_MENTOR:
                return actor.startup_id == resource.pk
            return action == Action.SHOW

        if isinstance(resource, Checkin):
            return actor.startup_id is not None and actor.startup_id == resource.startup_id

        if isinstance(resource, CheckinComment):
            if action == Action.SHOW:
                return self.can_access(actor, resource.checkin, Action.SHOW)
            return resource.user_id == actor.pk

        return False


@lru_cache(maxsize=None)
def _load_policy(path):
    return import_string(path)()


def get_access_policy():
    return _load_policy(settings.ACCESS_POLICY)


def can_access(actor, resource, action) -> bool:
    """Ask the configured policy whether ``actor`` may ``action`` ``resource``."""
    return get_access_policy().can_access(actor, resource, action)


class PolicyPermission(BasePermission):
    """
    DRF adapter for the access policy.

    Views declare ``policy_actions``, a mapping of view action (or HTTP
    method name, lowercased) to policy Action.

    Usage:
        class CheckinViewSet(viewsets.ModelViewSet):
            permission_classes = [IsAuthenticated, PolicyPermission]
            policy_actions = {'retrieve': Action.SHOW}
    """

    message = 'You do not have permission to perform this action.'

    def has_object_permission(self, request, view, obj):
        actions = getattr(view, 'policy_actions', {})
        key = getattr(view, 'action', None) or request.method.lower()
        action = actions.get(key, Action.SHOW)
        return can_access(request.user, obj, action)
