"""Notification models."""

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.core.models import TimeStampedModel


class Notification(TimeStampedModel):
    """User notification for review outcomes and other events."""

    class NotificationType(models.TextChoices):
        APPLICATION_SUBMITTED = "application_submitted", "Application Submitted"
        APPLICATION_APPROVED = "application_approved", "Application Approved"
        APPLICATION_REJECTED = "application_rejected", "Application Rejected"
        MESSAGE_PUBLISHED = "message_published", "Message Published"
        MESSAGE_REJECTED = "message_rejected", "Message Rejected"
        MESSAGE_UNPUBLISHED = "message_unpublished", "Message Unpublished"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    notification_type = models.CharField(
        max_length=30,
        choices=NotificationType.choices,
    )
    title = models.CharField(max_length=200)
    message = models.TextField()
    link = models.CharField(max_length=500, blank=True)
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    email_sent = models.BooleanField(default=False)
    email_sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="notificatio_user_id_05b4c1_idx"),
            models.Index(fields=["user", "is_read"], name="notificatio_user_id_9f2a7e_idx"),
            models.Index(fields=["notification_type"], name="notificatio_notific_e1d5b3_idx"),
        ]

    def __str__(self):
        return f"{self.notification_type} notification for {self.user.email}"

    def mark_read(self):
        """Mark the notification as read."""
        if not self.is_read:
            self.is_read = True
            self.read_at = timezone.now()
            self.save(update_fields=["is_read", "read_at", "updated_at"])


class NotificationPreference(TimeStampedModel):
    """User notification preferences."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notification_preferences",
    )
    email_applications = models.BooleanField(default=True)
    email_messages = models.BooleanField(default=True)

    class Meta:
        verbose_name = "Notification Preference"
        verbose_name_plural = "Notification Preferences"

    def __str__(self):
        return f"Notification preferences for {self.user.email}"
