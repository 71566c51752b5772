from django.contrib import admin
from apps.notifications.models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """Admin interface for Notifications."""

    list_display = ['message', 'startup', 'kind', 'actor', 'read_at', 'created_at']
    list_filter = ['kind', 'created_at']
    search_fields = ['message', 'startup__name']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
