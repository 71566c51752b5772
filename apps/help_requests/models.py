# ==========================================
# apps/help_requests/models.py
# ==========================================

from django.db import models


class Request(models.Model):
    """A startup asking the community for help."""

    startup = models.ForeignKey(
        'startups.Startup',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='help_requests'
    )
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='help_requests')
    title = models.CharField(max_length=200)
    body = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'requests'
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Response(models.Model):
    """An offer to fulfil a help request. Stored only; no workflow yet."""

    data = models.TextField(blank=True)
    amount_paid = models.IntegerField(default=0)
    accepted_at = models.DateTimeField(null=True, blank=True)
    rejected_because = models.CharField(max_length=255, blank=True)
    request = models.ForeignKey(Request, on_delete=models.CASCADE, related_name='responses')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='help_responses')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'responses'
        ordering = ['-created_at']

    def __str__(self):
        return f"Response by {self.user} to {self.request}"
