"""Services for notifications app."""

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

from apps.notifications.models import Notification, NotificationPreference

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for creating and managing notifications."""

    @classmethod
    def notify(
        cls,
        user,
        notification_type: str,
        title: str,
        message: str,
        link: str = "",
        send_email: bool = True,
    ) -> Notification:
        """
        Create a notification for a user, optionally send email.

        Args:
            user: The user to notify.
            notification_type: Type of notification (from Notification.NotificationType).
            title: Title of the notification.
            message: Message body of the notification.
            link: Optional link to relevant resource.
            send_email: Whether to attempt sending an email (default True).

        Returns:
            The created Notification instance.
        """
        notification = Notification.objects.create(
            user=user,
            notification_type=notification_type,
            title=title,
            message=message,
            link=link,
        )

        if send_email:
            cls._maybe_send_email(notification)

        return notification

    @classmethod
    def mark_read(cls, user, notification_ids: list) -> int:
        """
        Mark specific notifications as read for a user.

        Returns:
            Count of notifications updated.
        """
        return Notification.objects.filter(
            user=user,
            id__in=notification_ids,
            is_read=False,
        ).update(is_read=True, read_at=timezone.now())

    @classmethod
    def mark_all_read(cls, user) -> int:
        """Mark all notifications as read for a user."""
        return Notification.objects.filter(
            user=user,
            is_read=False,
        ).update(is_read=True, read_at=timezone.now())

    @classmethod
    def get_unread_count(cls, user) -> int:
        """Get count of unread notifications for a user."""
        return Notification.objects.filter(
            user=user,
            is_read=False,
        ).count()

    @classmethod
    def _maybe_send_email(cls, notification: Notification) -> bool:
        """
        Send email if user preferences allow it.

        Returns:
            True if email was sent, False otherwise.
        """
        try:
            prefs = notification.user.notification_preferences
        except NotificationPreference.DoesNotExist:
            # No stored preferences means defaults (all enabled)
            prefs = NotificationPreference(user=notification.user)

        if not cls._should_email(notification, prefs):
            return False

        sent = send_mail(
            subject=notification.title,
            message=notification.message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[notification.user.email],
            fail_silently=True,
        )
        if not sent:
            logger.warning(f"Email for notification {notification.pk} was not delivered")
            return False

        notification.email_sent = True
        notification.email_sent_at = timezone.now()
        notification.save(update_fields=["email_sent", "email_sent_at"])
        return True

    @classmethod
    def _should_email(cls, notification: Notification, prefs: NotificationPreference) -> bool:
        """Determine if notification should trigger email based on type and prefs."""
        types = Notification.NotificationType
        type_to_pref = {
            types.APPLICATION_SUBMITTED: prefs.email_applications,
            types.APPLICATION_APPROVED: prefs.email_applications,
            types.APPLICATION_REJECTED: prefs.email_applications,
            types.MESSAGE_PUBLISHED: prefs.email_messages,
            types.MESSAGE_REJECTED: prefs.email_messages,
            types.MESSAGE_UNPUBLISHED: prefs.email_messages,
        }
        return type_to_pref.get(notification.notification_type, True)
