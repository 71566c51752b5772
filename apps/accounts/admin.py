# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .flags import Role
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for community members.

    Roles, setup progress and email preferences are stored as JSON lists
    and edited as such; the list view shows them as badges.
    """

    list_display = [
        'email',
        'display_name',
        'roles_badges',
        'startup',
        'is_active',
        'setup_done',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
        'startup__name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Profile', {
            'fields': ('location', 'one_liner', 'bio', 'linkedin_url', 'twitter', 'startup'),
        }),
        ('Roles & Setup', {
            'fields': ('roles', 'setup', 'email_on'),
        }),
        ('Chat', {
            'fields': ('hipchat_username', 'hipchat_password'),
            'classes': ('collapse',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def roles_badges(self, obj):
        if not obj.roles:
            return '-'
        return format_html(
            ' '.join(
                '<span style="background: #A47449; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>' for _ in obj.roles
            ),
            *[Role(role).label for role in obj.roles]
        )
    roles_badges.short_description = 'Roles'

    def setup_done(self, obj):
        return obj.is_setup_complete
    setup_done.boolean = True
    setup_done.short_description = 'Setup'

    actions = ['mark_setup_complete', 'reset_account_type']

    @admin.action(description='Mark setup complete')
    def mark_setup_complete(self, request, queryset):
        count = 0
        for user in queryset:
            user.setup_complete()
            count += 1
        self.message_user(request, f'Completed setup for {count} user(s).')

    @admin.action(description='Make selected users pick an account type again')
    def reset_account_type(self, request, queryset):
        from .services import update_account_type

        count = 0
        for user in queryset:
            update_account_type(user=user, reset=True)
            count += 1
        self.message_user(request, f'Reset account type for {count} user(s).')

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('startup')
