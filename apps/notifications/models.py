# ==========================================
# apps/notifications/models.py
# ==========================================

from django.db import models
import uuid


class NotificationKind(models.TextChoices):
    NEW_CHECKIN = 'new_checkin', 'New checkin'


class Notification(models.Model):
    """Activity entry on a startup's feed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    startup = models.ForeignKey('startups.Startup', on_delete=models.CASCADE, related_name='notifications')
    checkin = models.ForeignKey(
        'checkins.Checkin',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='notifications'
    )
    actor = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications_caused'
    )
    kind = models.CharField(max_length=30, choices=NotificationKind.choices)
    message = models.CharField(max_length=255)
    read_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['startup', 'created_at'], name='notificatio_startup_2a7c3d_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.message

    @classmethod
    def create_for_new_checkin(cls, checkin):
        """Announce a completed checkin on its startup's feed."""
        return cls.objects.create(
            startup=checkin.startup,
            checkin=checkin,
            actor=checkin.user,
            kind=NotificationKind.NEW_CHECKIN,
            message=f"{checkin.startup.name} completed their checkin for {checkin.time_label}",
        )
