"""Core models - base classes and shared models."""

import uuid

from django.db import models
from django.utils import timezone


class TimeStampedModel(models.Model):
    """Abstract base model with created/updated timestamps."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


DECISION_ACTIONS = (
    "application_approved",
    "application_rejected",
    "message_approved",
    "message_rejected",
    "message_unpublished",
)


class AuditLogQuerySet(models.QuerySet):
    def for_instance(self, instance):
        """Entries recorded against one row, newest first."""
        return self.filter(
            resource_type=instance.__class__.__name__,
            resource_id=str(instance.pk),
        ).select_related("actor")

    def decisions(self):
        return self.filter(action__in=DECISION_ACTIONS)


class AuditLog(models.Model):
    """Immutable audit log for review decisions, submissions and registry changes."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    # Actor information (captured at time of action)
    actor = models.ForeignKey(
        "accounts.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="audit_logs",
    )
    actor_email = models.EmailField(blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)

    action = models.CharField(max_length=50)  # approved, rejected, submitted, ...
    resource_type = models.CharField(max_length=100)  # UserApplication, Member, ...
    resource_id = models.CharField(max_length=100)

    changes = models.JSONField(default=dict, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    objects = AuditLogQuerySet.as_manager()

    class Meta:
        ordering = ["-timestamp"]
        indexes = [
            models.Index(fields=["timestamp"], name="core_auditl_timesta_8a1f2e_idx"),
            models.Index(fields=["resource_type", "resource_id"], name="core_auditl_resourc_3c7d91_idx"),
            models.Index(fields=["actor"], name="core_auditl_actor_i_5b0e44_idx"),
        ]

    def __str__(self):
        return f"{self.action} {self.resource_type}:{self.resource_id} at {self.timestamp}"

    def save(self, *args, **kwargs):
        """Prevent updates to audit log entries."""
        if self.pk and AuditLog.objects.filter(pk=self.pk).exists():
            raise ValueError("AuditLog entries cannot be modified after creation.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """Prevent deletion of audit log entries."""
        raise ValueError("AuditLog entries cannot be deleted.")


class SystemSetting(TimeStampedModel):
    """Site-wide settings manageable from the Django admin (branding, contact)."""

    class Category(models.TextChoices):
        GENERAL = "general", "General"
        BRANDING = "branding", "Branding"
        CONTACT = "contact", "Contact"

    # Keys read by the branding context processor, with their fallbacks
    BRANDING_DEFAULTS = {
        "brand_name": "Youth Hub",
        "brand_logo_url": None,
        "support_email": None,
        "footer_text": None,
    }

    key = models.CharField(max_length=100, unique=True)
    value = models.JSONField()
    description = models.TextField(blank=True)
    category = models.CharField(max_length=50, choices=Category.choices, default=Category.GENERAL)
    updated_by = models.ForeignKey(
        "accounts.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="updated_settings",
    )

    class Meta:
        ordering = ["category", "key"]

    def __str__(self):
        return f"{self.key}: {self.value}"

    @classmethod
    def get_value(cls, key: str, default=None):
        """Get a setting value by key."""
        try:
            return cls.objects.get(key=key).value
        except cls.DoesNotExist:
            return default

    @classmethod
    def set_value(cls, key: str, value, user=None, description: str = "", category: str = Category.GENERAL):
        """Set a setting value by key."""
        setting, _ = cls.objects.update_or_create(
            key=key,
            defaults={
                "value": value,
                "description": description,
                "category": category,
                "updated_by": user,
            },
        )
        return setting

    @classmethod
    def branding(cls) -> dict:
        """Branding values in one query, falling back to BRANDING_DEFAULTS."""
        stored = dict(cls.objects.filter(key__in=cls.BRANDING_DEFAULTS).values_list("key", "value"))
        return {key: stored.get(key, default) for key, default in cls.BRANDING_DEFAULTS.items()}
