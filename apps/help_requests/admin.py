from django.contrib import admin
from apps.help_requests.models import Request, Response


class ResponseInline(admin.TabularInline):
    """Inline admin for responses to a request."""
    model = Response
    extra = 0
    fields = ['user', 'amount_paid', 'accepted_at', 'rejected_because', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Request)
class RequestAdmin(admin.ModelAdmin):
    """Admin interface for help requests."""

    list_display = ['title', 'startup', 'user', 'created_at']
    search_fields = ['title', 'body', 'startup__name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ResponseInline]


@admin.register(Response)
class ResponseAdmin(admin.ModelAdmin):
    """Admin interface for responses."""

    list_display = ['request', 'user', 'amount_paid', 'accepted_at', 'rejected_because', 'created_at']
    list_filter = ['accepted_at', 'created_at']
    search_fields = ['request__title', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
