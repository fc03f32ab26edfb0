"""Permission service for user capabilities."""


class PermissionService:
    """
    Single place for capability checks.

    Permission hierarchy:
    - Superuser / staff: Full access
    - System Admin: Full access, including site settings
    - System Manager: Reviews applications and manages the registry
    - Everyone else: Submits and follows their own records

    Views evaluate these checks once, before calling any review service.
    """

    @staticmethod
    def is_system_admin(user) -> bool:
        """Check if user is a system administrator."""
        if not user.is_authenticated:
            return False
        if user.is_superuser:
            return True
        return user.is_system_admin or user.groups.filter(name="system_admins").exists()

    @staticmethod
    def is_admin(user) -> bool:
        """Check if user may use the admin dashboard."""
        if not user.is_authenticated:
            return False
        if user.is_superuser or user.is_staff:
            return True
        return user.is_admin

    @staticmethod
    def can_approve_applications(user) -> bool:
        return PermissionService.is_admin(user)

    @staticmethod
    def can_manage_members(user) -> bool:
        return PermissionService.is_admin(user)

    @staticmethod
    def can_modify_system_settings(user) -> bool:
        return PermissionService.is_system_admin(user)

    @staticmethod
    def can_submit_voice_of_change(user) -> bool:
        """All active users may submit messages."""
        return user.is_authenticated and user.is_account_active

    @staticmethod
    def can_edit_voice_of_change(user, voice_of_change) -> bool:
        """Authors may edit their own messages while pending or rejected."""
        if not user.is_authenticated:
            return False
        return voice_of_change.submitted_by_id == user.pk and voice_of_change.is_editable
