"""Admin configuration for notifications app."""

from django.contrib import admin

from .models import Notification, NotificationPreference


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("user", "notification_type", "title", "is_read", "email_sent", "created_at")
    list_filter = ("notification_type", "is_read", "email_sent")
    search_fields = ("user__email", "title")
    ordering = ("-created_at",)


@admin.register(NotificationPreference)
class NotificationPreferenceAdmin(admin.ModelAdmin):
    list_display = ("user", "email_applications", "email_messages")
    search_fields = ("user__email",)
