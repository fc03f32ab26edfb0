"""Mixins for admin dashboard access control."""

import logging

from django.contrib.auth.mixins import UserPassesTestMixin

from apps.accounts.services import PermissionService

logger = logging.getLogger(__name__)


class AdminRequiredMixin(UserPassesTestMixin):
    """Require a System Admin, System Manager or staff account."""

    def test_func(self):
        return PermissionService.is_admin(self.request.user)

    def handle_no_permission(self):
        user = self.request.user
        if user.is_authenticated:
            logger.warning(
                f"Refused admin access to {self.request.path} for {user.email} ({user.user_type})"
            )
        return super().handle_no_permission()

    def get_context_data(self, **kwargs):
        """Add admin navigation context."""
        context = super().get_context_data(**kwargs)
        context["is_system_admin"] = PermissionService.is_system_admin(self.request.user)
        return context


class SystemAdminRequiredMixin(AdminRequiredMixin):
    """Require a System Admin; used for site-wide settings."""

    def test_func(self):
        return PermissionService.can_modify_system_settings(self.request.user)
