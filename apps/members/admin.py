"""Admin configuration for members app."""

from django.contrib import admin

from apps.members.models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ["membership_id", "name", "email", "member_since", "is_active", "is_lifetime_member", "is_self_registered"]
    list_filter = ["is_active", "is_lifetime_member", "is_self_registered"]
    search_fields = ["membership_id", "name", "email"]
    readonly_fields = ["membership_id", "member_since", "is_self_registered", "created_at", "updated_at"]
