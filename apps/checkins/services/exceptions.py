"""
Domain-specific exceptions for checkins app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CheckinsServiceError(Exception):
    """Base exception for all checkins service errors."""
    pass


class CheckinValidationError(CheckinsServiceError):
    """
    Raised when a checkin cannot be saved.

    ``errors`` maps field name to a list of messages, the same shape DRF
    uses for serializer errors.
    """

    def __init__(self, errors):
        self.errors = errors
        super().__init__(f"Invalid checkin: {', '.join(sorted(errors))}")


class NoStartupError(CheckinsServiceError):
    """Raised when a user without a startup tries to check in."""
    pass


class CheckinNotFoundError(CheckinsServiceError):
    """Raised when a checkin does not exist or is inaccessible."""
    pass
