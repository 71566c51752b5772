# ==========================================
# apps/startups/admin.py
# ==========================================

from django.contrib import admin
from apps.startups.models import Startup, Invite


@admin.register(Startup)
class StartupAdmin(admin.ModelAdmin):
    """Admin interface for Startups."""

    list_display = ['name', 'onboarded', 'created_at']
    list_filter = ['onboarded', 'created_at']
    search_fields = ['name', 'one_liner']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['name']

    actions = ['mark_onboarded']

    @admin.action(description='Mark selected startups as onboarded')
    def mark_onboarded(self, request, queryset):
        count = queryset.update(onboarded=True)
        self.message_user(request, f'Onboarded {count} startup(s).')


@admin.register(Invite)
class InviteAdmin(admin.ModelAdmin):
    """Admin interface for Invites."""

    list_display = ['startup', 'to', 'email', 'invite_type', 'accepted_at', 'expires_at', 'created_at']
    list_filter = ['invite_type', 'created_at']
    search_fields = ['email', 'to__email', 'startup__name']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
