"""Admin configuration for core app."""

from django.contrib import admin

from .models import DECISION_ACTIONS, AuditLog, SystemSetting


@admin.register(SystemSetting)
class SystemSettingAdmin(admin.ModelAdmin):
    """Branding and contact settings; the editing admin is recorded."""

    list_display = ("key", "category", "value", "updated_by", "updated_at")
    list_filter = ("category",)
    search_fields = ("key", "description")
    ordering = ("category", "key")
    readonly_fields = ("updated_by", "updated_at")
    fieldsets = (
        (None, {"fields": ("key", "category", "value", "description")}),
        ("Last change", {"fields": ("updated_by", "updated_at"), "classes": ("collapse",)}),
    )

    def save_model(self, request, obj, form, change):
        obj.updated_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    """Read-only view of the audit trail."""

    list_display = ("timestamp", "actor_email", "action", "resource_type", "resource_id", "is_decision")
    list_filter = ("action", "resource_type")
    search_fields = ("actor_email", "resource_id")
    date_hierarchy = "timestamp"
    readonly_fields = [f.name for f in AuditLog._meta.fields]

    @admin.display(boolean=True, description="Review decision")
    def is_decision(self, obj):
        return obj.action in DECISION_ACTIONS

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
