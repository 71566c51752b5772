"""Profile lookups for the account pages."""

from django.utils import timezone

from apps.accounts.flags import Role
from apps.accounts.models import User
from apps.accounts.policy import Action, can_access
from apps.startups.models import Invite


def get_current_invite(*, user: User, now=None):
    """
    Most recent invite addressed to the user that can still be accepted.

    Invites are matched on the recipient account, never on email address:
    an unverified email would otherwise hand someone else's invite over.
    """
    invite = (
        Invite.objects
        .not_accepted()
        .filter(to=user)
        .select_related('startup')
        .order_by('-created_at')
        .first()
    )
    if invite is not None and not invite.is_active(now or timezone.now()):
        return None
    return invite


def can_invite_as_mentor(*, viewer: User, user: User) -> bool:
    """Whether ``viewer`` may invite ``user`` to mentor the viewer's startup."""
    if Role.MENTOR not in user.roles or viewer.startup_id is None:
        return False
    return can_access(viewer, viewer.startup, Action.INVITE_MENTOR)


def get_profile_context(*, user: User, viewer: User, now=None) -> dict:
    """
    Extra data shown next to a profile.

    Own profile: the pending invite, if any. Someone else's mentor
    profile: whether the viewer may invite them.
    """
    context = {
        'current_invite': None,
        'can_invite_as_mentor': False,
    }
    if user.pk == viewer.pk:
        context['current_invite'] = get_current_invite(user=user, now=now)
    elif Role.MENTOR in user.roles:
        context['can_invite_as_mentor'] = can_invite_as_mentor(viewer=viewer, user=user)
    return context
