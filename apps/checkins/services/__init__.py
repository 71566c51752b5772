"""
Checkins app services layer.

Services contain business logic and orchestrate operations across models.
Time-dependent operations take ``now`` so callers and tests control the clock.
"""

from .exceptions import (
    CheckinsServiceError,
    CheckinValidationError,
    NoStartupError,
    CheckinNotFoundError,
)

from .checkin_management import (
    validate_checkin,
    stamp_progress,
    save_checkin,
    create_checkin,
    update_checkin,
)

from .queries import (
    current_window_start,
    current_checkin_for_startups,
    current_checkin_for_startup,
    video_url_is_unique,
)

from .comments import (
    add_comment,
    delete_comment,
)

from .reminders import (
    reminder_recipients,
    schedule_reminder,
    send_before_checkin_email,
    send_after_checkin_email,
)


__all__ = [
    # Exceptions
    'CheckinsServiceError',
    'CheckinValidationError',
    'NoStartupError',
    'CheckinNotFoundError',
    # Checkin management
    'validate_checkin',
    'stamp_progress',
    'save_checkin',
    'create_checkin',
    'update_checkin',
    # Queries
    'current_window_start',
    'current_checkin_for_startups',
    'current_checkin_for_startup',
    'video_url_is_unique',
    # Comments
    'add_comment',
    'delete_comment',
    # Reminders
    'reminder_recipients',
    'schedule_reminder',
    'send_before_checkin_email',
    'send_after_checkin_email',
]
