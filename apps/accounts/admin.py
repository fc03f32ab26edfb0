"""Admin configuration for accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for User model."""

    list_display = ("email", "first_name", "last_name", "user_type", "status", "membership_number", "is_staff")
    list_filter = ("user_type", "status", "is_active", "is_staff")
    search_fields = ("email", "first_name", "last_name", "membership_number")
    ordering = ("email",)
    readonly_fields = ("membership_number",)

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Personal info", {"fields": ("first_name", "last_name", "phone", "address", "date_of_birth", "gender", "designation")}),
        ("Classification", {"fields": ("user_type", "status", "membership_number")}),
        (
            "Permissions",
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                ),
            },
        ),
        ("Important dates", {"fields": ("last_login", "date_joined")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "first_name",
                    "last_name",
                    "password1",
                    "password2",
                    "user_type",
                ),
            },
        ),
    )
