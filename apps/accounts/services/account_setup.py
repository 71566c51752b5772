"""Account type selection and onboarding completion."""

import logging

from django.db import transaction

from apps.accounts.flags import Role, SELECTABLE_ROLES, SetupStep
from apps.accounts.models import User

from .exceptions import InvalidRoleError

logger = logging.getLogger(__name__)


@transaction.atomic
def update_account_type(*, user: User, reset: bool = False, role: str = '') -> User:
    """
    Change the account type picked during onboarding.

    Args:
        user: User choosing an account type
        reset: Drop the spectator role and reopen the account-type step
        role: Role to add; adding a role the user already has is a no-op

    Returns:
        Saved User instance

    Raises:
        InvalidRoleError: If role is unknown or not self-assignable
    """
    if reset:
        user.roles.remove(Role.SPECTATOR)
        user.setup.remove(SetupStep.ACCOUNT_TYPE)

    if role:
        if role not in SELECTABLE_ROLES:
            raise InvalidRoleError(f"'{role}' is not a selectable account type")
        user.roles.add(role)
        user.setup.add(SetupStep.ACCOUNT_TYPE)

    user.save(update_fields=['roles', 'setup'])
    logger.info("Account type for %s is now %s", user.pk, user.roles.to_list())
    return user


def complete_welcome(*, user: User) -> User:
    """Finish onboarding for the user."""
    user.setup_complete()
    return user
