# ==========================================
# apps/checkins/admin.py
# ==========================================

from django.contrib import admin
from apps.checkins.models import Checkin, CheckinComment


class CheckinCommentInline(admin.TabularInline):
    """Inline admin for checkin comments."""
    model = CheckinComment
    extra = 0
    fields = ['user', 'content', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Checkin)
class CheckinAdmin(admin.ModelAdmin):
    """Admin interface for Checkins."""

    list_display = [
        'startup',
        'time_label',
        'user',
        'submitted_at',
        'completed_at',
        'comment_count',
        'created_at',
    ]
    list_filter = ['created_at']
    search_fields = ['startup__name', 'user__email', 'start_focus']
    readonly_fields = ['comment_count', 'submitted_at', 'completed_at', 'created_at', 'updated_at']
    inlines = [CheckinCommentInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Startup', {
            'fields': ('startup', 'user')
        }),
        ('Before', {
            'fields': ('start_focus', 'start_why', 'start_video_url', 'start_comments')
        }),
        ('After', {
            'fields': ('end_video_url', 'end_comments')
        }),
        ('Progress', {
            'fields': ('submitted_at', 'completed_at', 'comment_count'),
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
