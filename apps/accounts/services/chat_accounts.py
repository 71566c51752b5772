"""Chat account provisioning services."""

import logging

from django.db import transaction

from apps.accounts import chat
from apps.accounts.models import User

from .exceptions import ChatProvisioningError

logger = logging.getLogger(__name__)


@transaction.atomic
def generate_chat_account(*, user: User) -> User:
    """
    Create chat credentials for the user.

    Raises:
        ChatProvisioningError: If the chat service rejects the request
    """
    credentials = chat.get_chat_provisioner().create_account(user)
    user.hipchat_username = credentials.username
    user.hipchat_password = credentials.password
    user.save(update_fields=['hipchat_username', 'hipchat_password'])
    logger.info("Chat account created for %s", user.pk)
    return user


def reset_chat_account(*, user: User) -> bool:
    """
    Drop and recreate the user's chat account.

    Returns:
        True on success, False if the chat service failed. Nothing is
        retried; the caller tells the user to contact support.
    """
    provisioner = chat.get_chat_provisioner()
    try:
        if user.has_chat_account:
            provisioner.delete_account(user)
        credentials = provisioner.create_account(user)
    except ChatProvisioningError as e:
        logger.warning("Chat account reset failed for %s: %s", user.pk, e)
        return False

    user.hipchat_username = credentials.username
    user.hipchat_password = credentials.password
    user.save(update_fields=['hipchat_username', 'hipchat_password'])
    logger.info("Chat account reset for %s", user.pk)
    return True
