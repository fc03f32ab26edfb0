"""Core services including audit logging."""

from typing import Any, Optional

from .middleware import get_audit_context, get_current_user
from .models import AuditLog


class AuditService:
    """Service for creating audit log entries."""

    @classmethod
    def log(
        cls,
        action: str,
        resource_type: str,
        resource_id: Any,
        changes: Optional[dict] = None,
        metadata: Optional[dict] = None,
        actor=None,
    ) -> AuditLog:
        """Create an audit log entry.

        The actor defaults to the authenticated user of the current request,
        so services can log without threading the request through.
        """
        if actor is None:
            actor = get_current_user()

        context = get_audit_context()
        metadata = dict(metadata or {})
        if context["user_agent"]:
            metadata.setdefault("user_agent", context["user_agent"])

        return AuditLog.objects.create(
            actor=actor,
            actor_email=actor.email if actor else "",
            ip_address=context["ip_address"],
            action=action,
            resource_type=resource_type,
            resource_id=str(resource_id),
            changes=changes or {},
            metadata=metadata,
        )

    @classmethod
    def log_transition(cls, instance, action: str, from_status: str, to_status: str, actor=None):
        """Log a status transition on a reviewable record."""
        return cls.log(
            action=action,
            resource_type=instance.__class__.__name__,
            resource_id=instance.pk,
            changes={"status": [from_status, to_status]},
            actor=actor,
        )

    @classmethod
    def log_create(cls, instance, actor=None):
        """Log a model creation."""
        return cls.log(
            action="created",
            resource_type=instance.__class__.__name__,
            resource_id=instance.pk,
            actor=actor,
            metadata={"model": f"{instance._meta.app_label}.{instance._meta.model_name}"},
        )

    @classmethod
    def log_update(cls, instance, changes: dict, actor=None):
        """Log a model update with changes."""
        return cls.log(
            action="updated",
            resource_type=instance.__class__.__name__,
            resource_id=instance.pk,
            changes=changes,
            actor=actor,
        )

    @classmethod
    def log_delete(cls, instance, actor=None):
        """Log a model deletion. Call before the row is removed."""
        return cls.log(
            action="deleted",
            resource_type=instance.__class__.__name__,
            resource_id=instance.pk,
            actor=actor,
            metadata={"repr": str(instance)},
        )
