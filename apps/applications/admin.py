"""Admin configuration for applications app."""

from django.contrib import admin
from django.utils.html import format_html

from apps.applications.models import (
    InternshipApplication,
    UserApplication,
    VoiceOfChange,
    VolunteerApplication,
)

STATUS_COLORS = {
    "pending": "#F59E0B",
    "approved": "#10B981",
    "rejected": "#EF4444",
}


def status_badge(obj):
    return format_html(
        '<span style="background-color: {}; color: white; padding: 2px 8px; border-radius: 4px;">{}</span>',
        STATUS_COLORS.get(obj.status.lower(), "#9CA3AF"),
        obj.get_status_display(),
    )


status_badge.short_description = "Status"


class ReviewableApplicationAdmin(admin.ModelAdmin):
    """Review fields are read only here; decisions go through the dashboard."""

    list_filter = ["status", "created_at"]
    readonly_fields = ["status", "reviewed_by", "processed_at", "created_at", "updated_at"]
    date_hierarchy = "created_at"

    def has_add_permission(self, request):
        return False


@admin.register(UserApplication)
class UserApplicationAdmin(ReviewableApplicationAdmin):
    list_display = ["submitted_by", "requested_user_type", status_badge, "reviewed_by", "created_at"]
    list_filter = ["status", "requested_user_type", "created_at"]
    search_fields = ["submitted_by__email", "submitted_by__first_name", "submitted_by__last_name"]


@admin.register(VolunteerApplication)
class VolunteerApplicationAdmin(ReviewableApplicationAdmin):
    list_display = ["name", "email", "contact_number", status_badge, "created_at"]
    search_fields = ["name", "email", "contact_number"]


@admin.register(InternshipApplication)
class InternshipApplicationAdmin(ReviewableApplicationAdmin):
    list_display = ["name", "email", "field_of_interest", "duration_months", status_badge, "created_at"]
    search_fields = ["name", "email", "field_of_interest"]


@admin.register(VoiceOfChange)
class VoiceOfChangeAdmin(admin.ModelAdmin):
    list_display = ["title", "submitted_by", status_badge, "published_online", "published_at", "created_at"]
    list_filter = ["status", "published_online"]
    search_fields = ["title", "submitted_by__email"]
    readonly_fields = ["status", "published_at", "published_online", "created_at", "updated_at"]
