"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidRoleError,
    ChatProvisioningError,
)
from .account_setup import update_account_type, complete_welcome
from .profiles import get_current_invite, can_invite_as_mentor, get_profile_context
from .chat_accounts import generate_chat_account, reset_chat_account

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidRoleError',
    'ChatProvisioningError',
    # Services
    'update_account_type',
    'complete_welcome',
    'get_current_invite',
    'can_invite_as_mentor',
    'get_profile_context',
    'generate_chat_account',
    'reset_chat_account',
]
