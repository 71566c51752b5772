"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidRoleError(AccountsServiceError):
    """Raised when a role is unknown or cannot be self-assigned."""
    pass


class ChatProvisioningError(AccountsServiceError):
    """Raised when the chat service cannot create or delete an account."""
    pass
