# ==========================================
# apps/startups/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class StartupQuerySet(models.QuerySet):

    def onboarded(self):
        return self.filter(onboarded=True)


class Startup(models.Model):
    """A company taking part in the weekly checkin cycle."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    one_liner = models.CharField(max_length=255, blank=True)
    onboarded = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = StartupQuerySet.as_manager()

    class Meta:
        db_table = 'startups'
        indexes = [
            models.Index(fields=['onboarded'], name='startups_onboard_3c1f0e_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name


class InviteType(models.TextChoices):
    TEAM_MEMBER = 'team_member', 'Team member'
    MENTOR = 'mentor', 'Mentor'


class InviteQuerySet(models.QuerySet):

    def not_accepted(self):
        return self.filter(accepted_at__isnull=True)


class Invite(models.Model):
    """
    Invitation for a user to join a startup as team member or mentor.

    Invites are only looked up here; accepting them happens elsewhere.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    startup = models.ForeignKey(Startup, on_delete=models.CASCADE, related_name='invites')
    from_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sent_invites'
    )
    to = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='received_invites'
    )
    email = models.EmailField(max_length=255, blank=True)
    invite_type = models.CharField(max_length=20, choices=InviteType.choices, default=InviteType.TEAM_MEMBER)
    accepted_at = models.DateTimeField(null=True, blank=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = InviteQuerySet.as_manager()

    class Meta:
        db_table = 'invites'
        indexes = [
            models.Index(fields=['to', 'accepted_at'], name='invites_to_id_5d2a71_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        target = self.to or self.email
        return f"{self.get_invite_type_display()} invite to {target} for {self.startup}"

    @property
    def accepted(self):
        return self.accepted_at is not None

    def is_active(self, now=None):
        """An invite is usable while it is neither accepted nor expired."""
        if self.accepted:
            return False
        if self.expires_at is None:
            return True
        now = now or timezone.now()
        return now < self.expires_at
