# ==========================================
# apps/checkins/models.py
# ==========================================

import logging
import uuid

from django.db import DatabaseError, models, transaction
from django.utils import timezone

from .windows import week_for_time

logger = logging.getLogger(__name__)


class CheckinQuerySet(models.QuerySet):

    def ordered(self):
        return self.order_by('-created_at')

    def completed(self):
        return self.filter(completed_at__isnull=False)


class Checkin(models.Model):
    """
    A startup's weekly report.

    The 'before' part (focus, why, video) is filed Tuesday/Wednesday; the
    'after' part (video, comments) the following Monday/Tuesday.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    startup = models.ForeignKey('startups.Startup', on_delete=models.CASCADE, related_name='checkins')
    # Logged-in user who created the checkin
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='checkins'
    )

    # Before
    start_focus = models.TextField(blank=True)
    start_why = models.TextField(blank=True)
    start_video_url = models.URLField(max_length=255, blank=True)
    start_comments = models.TextField(blank=True)

    # After
    end_video_url = models.URLField(max_length=255, blank=True)
    end_comments = models.TextField(blank=True)

    comment_count = models.PositiveIntegerField(default=0)

    submitted_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CheckinQuerySet.as_manager()

    class Meta:
        db_table = 'checkins'
        indexes = [
            models.Index(fields=['startup', 'created_at'], name='checkins_startup_8b1d2e_idx'),
            models.Index(fields=['completed_at'], name='checkins_complet_4f9a1c_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.startup} - {self.time_label}"

    @property
    def submitted(self):
        return self.submitted_at is not None

    @property
    def completed(self):
        return self.completed_at is not None

    @property
    def before_completed(self):
        """The 'before' part has its focus and video."""
        return bool(self.start_focus.strip() and self.start_video_url.strip())

    @property
    def after_completed(self):
        """The 'after' part has its video."""
        return bool(self.end_video_url.strip())

    @property
    def time_label(self):
        return week_for_time(self.created_at or timezone.now())

    def update_comments_count(self):
        """
        Refresh the cached comment count.

        Skips validation: the count changes whenever someone comments, even
        mid-window when required fields are still blank.
        """
        self.comment_count = self.comments.count()
        try:
            # Savepoint: a failed refresh must not roll back the caller's work
            with transaction.atomic():
                self.save(update_fields=['comment_count', 'updated_at'])
        except DatabaseError:
            logger.exception("Could not refresh comment count for checkin %s", self.pk)


class CheckinComment(models.Model):
    """Comment left on a checkin by another community member."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    checkin = models.ForeignKey(Checkin, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='checkin_comments')
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'checkin_comments'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} on {self.checkin}"
