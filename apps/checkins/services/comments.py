"""Checkin comments."""

from django.db import transaction

from apps.accounts.models import User
from apps.checkins.models import Checkin, CheckinComment


@transaction.atomic
def add_comment(*, checkin: Checkin, user: User, content: str) -> CheckinComment:
    """Add a comment and refresh the checkin's cached count."""
    comment = CheckinComment.objects.create(checkin=checkin, user=user, content=content)
    checkin.update_comments_count()
    return comment


@transaction.atomic
def delete_comment(*, comment: CheckinComment) -> None:
    checkin = comment.checkin
    comment.delete()
    checkin.update_comments_count()
