"""Review decisions for applications and voice of change messages."""

import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.applications.exceptions import (
    ApplicationConflict,
    ApplicationNotFound,
    ApplicationValidationError,
    PersistenceFailure,
)
from apps.applications.models import (
    InternshipApplication,
    ReviewableApplication,
    UserApplication,
    VoiceOfChange,
    VolunteerApplication,
)
from apps.applications.services.identifiers import generate_membership_number
from apps.core.services import AuditService
from apps.notifications.models import Notification
from apps.notifications.services import NotificationService

logger = logging.getLogger(__name__)

User = get_user_model()

ADMIN_NOTES_MAX_LENGTH = 1000


def clean_admin_notes(notes, required: bool) -> str:
    """Validate reviewer notes; rejection needs them, approval does not."""
    notes = (notes or "").strip()
    if required and not notes:
        raise ApplicationValidationError({"admin_notes": ["Notes are required when rejecting."]})
    if len(notes) > ADMIN_NOTES_MAX_LENGTH:
        raise ApplicationValidationError(
            {"admin_notes": [f"Notes may not exceed {ADMIN_NOTES_MAX_LENGTH} characters."]}
        )
    return notes


class ReviewService:
    """
    Approve, reject or delete a reviewable application.

    Every decision runs in one transaction: the row is locked, the Pending
    precondition is checked, and the application, any side effects, the
    audit entry and the applicant's notification are written together.
    """

    model = None

    def __init__(self, model=None):
        if model is not None:
            self.model = model
        if self.model is None:
            raise ValueError("ReviewService needs an application model")

    def approve(self, application_id, admin, notes=None) -> ReviewableApplication:
        """Move a pending application to Approved."""
        notes = clean_admin_notes(notes, required=False)
        application = self._decide(
            application_id, admin, ReviewableApplication.Status.APPROVED, notes, verb="approved"
        )
        logger.info(
            f"{self.model.__name__} {application.pk} approved by {admin.email}"
        )
        return application

    def reject(self, application_id, admin, notes) -> ReviewableApplication:
        """Move a pending application to Rejected. Notes are mandatory."""
        notes = clean_admin_notes(notes, required=True)
        application = self._decide(
            application_id, admin, ReviewableApplication.Status.REJECTED, notes, verb="rejected"
        )
        logger.info(
            f"{self.model.__name__} {application.pk} rejected by {admin.email}"
        )
        return application

    def delete(self, application_id, admin=None) -> None:
        """Remove an application regardless of its status."""
        try:
            with transaction.atomic():
                application = self._get_for_update(application_id)
                AuditService.log_delete(application, actor=admin)
                application.delete()
        except DatabaseError as exc:
            logger.error(f"Failed to delete {self.model.__name__} {application_id}: {exc}")
            raise PersistenceFailure(f"Could not delete the {self.model.kind_label}.") from exc

        logger.info(f"{self.model.__name__} {application_id} deleted")

    def _decide(self, application_id, admin, new_status: str, notes: str, verb: str):
        try:
            with transaction.atomic():
                application = self._get_for_update(application_id)
                if not application.is_pending:
                    logger.warning(
                        f"Refused to mark {self.model.__name__} {application.pk} {verb}: "
                        f"status is {application.status}"
                    )
                    raise ApplicationConflict(f"Only pending applications can be {verb}.")

                previous_status = application.status
                application.status = new_status
                application.admin_notes = notes
                application.reviewed_by = admin
                application.processed_at = timezone.now()
                application.save()

                if new_status == ReviewableApplication.Status.APPROVED:
                    self.on_approved(application)

                AuditService.log_transition(
                    application,
                    action=f"application_{verb}",
                    from_status=previous_status,
                    to_status=new_status,
                    actor=admin,
                )
                self.notify_applicant(application)
        except DatabaseError as exc:
            logger.error(
                f"Failed to mark {self.model.__name__} {application_id} {verb}; "
                f"nothing was saved: {exc}"
            )
            raise PersistenceFailure(
                f"The {self.model.kind_label} could not be {verb}. No changes were saved."
            ) from exc

        return application

    def _get_for_update(self, application_id):
        try:
            return self.model.objects.select_for_update().get(pk=application_id)
        except self.model.DoesNotExist:
            raise ApplicationNotFound(
                f"{self.model.kind_label.capitalize()} {application_id} does not exist."
            )

    def on_approved(self, application) -> None:
        """Hook for side effects that must commit with the approval."""

    def notify_applicant(self, application) -> None:
        """Tell the submitting account about the decision, if there is one."""
        user = application.applicant
        if user is None:
            return

        if application.is_approved:
            notification_type = Notification.NotificationType.APPLICATION_APPROVED
            title = "Application Approved"
            message = f"Your {application.kind_label} has been approved."
        else:
            notification_type = Notification.NotificationType.APPLICATION_REJECTED
            title = "Application Rejected"
            message = f"Your {application.kind_label} has been rejected."
        if application.admin_notes:
            message += f" Notes: {application.admin_notes}"

        NotificationService.notify(
            user=user,
            notification_type=notification_type,
            title=title,
            message=message,
            link="/applications/",
        )


class UserApplicationReviewService(ReviewService):
    """Review of classification requests; approval reclassifies the user."""

    model = UserApplication

    def on_approved(self, application: UserApplication) -> None:
        """
        Apply the requested classification to the applicant.

        A membership number is issued only when the new type carries one
        and the user has none yet; an existing number is never replaced.
        """
        try:
            user = User.objects.select_for_update().get(pk=application.submitted_by_id)
        except User.DoesNotExist:
            raise ApplicationNotFound("The applicant no longer exists.")

        user.user_type = application.requested_user_type
        user.status = User.Status.ACTIVE

        if user.has_membership_number and not user.membership_number:
            user.membership_number = generate_membership_number(user.user_type)
            logger.info(f"Assigned membership number {user.membership_number} to {user.email}")

        user.save()


class VolunteerReviewService(ReviewService):
    model = VolunteerApplication


class InternshipReviewService(ReviewService):
    model = InternshipApplication


class VoiceOfChangeReviewService:
    """
    Moderation of voice of change messages.

    pending --approve--> approved (published)
    pending --reject-->  rejected
    approved --unpublish--> pending
    """

    def approve(self, message_id, admin, notes=None) -> VoiceOfChange:
        notes = clean_admin_notes(notes, required=False)

        def apply(message):
            message.status = VoiceOfChange.Status.APPROVED
            message.admin_notes = notes
            message.published_at = timezone.now()
            message.published_online = True

        return self._transition(
            message_id, admin, VoiceOfChange.Status.PENDING, apply, verb="approved",
            notification=(
                Notification.NotificationType.MESSAGE_PUBLISHED,
                "Message Published",
                "Your message \"{title}\" has been approved and published.",
            ),
        )

    def reject(self, message_id, admin, notes) -> VoiceOfChange:
        notes = clean_admin_notes(notes, required=True)

        def apply(message):
            message.status = VoiceOfChange.Status.REJECTED
            message.admin_notes = notes

        return self._transition(
            message_id, admin, VoiceOfChange.Status.PENDING, apply, verb="rejected",
            notification=(
                Notification.NotificationType.MESSAGE_REJECTED,
                "Message Rejected",
                "Your message \"{title}\" was not approved. Notes: {notes}",
            ),
        )

    def unpublish(self, message_id, admin) -> VoiceOfChange:
        def apply(message):
            message.status = VoiceOfChange.Status.PENDING
            message.published_at = None
            message.published_online = False

        return self._transition(
            message_id, admin, VoiceOfChange.Status.APPROVED, apply, verb="unpublished",
            notification=(
                Notification.NotificationType.MESSAGE_UNPUBLISHED,
                "Message Unpublished",
                "Your message \"{title}\" has been taken offline for review.",
            ),
        )

    def delete(self, message_id, admin=None) -> None:
        try:
            with transaction.atomic():
                message = self._get_for_update(message_id)
                AuditService.log_delete(message, actor=admin)
                message.delete()
        except DatabaseError as exc:
            logger.error(f"Failed to delete VoiceOfChange {message_id}: {exc}")
            raise PersistenceFailure("Could not delete the message.") from exc

    def _transition(self, message_id, admin, required_status, apply, verb, notification):
        try:
            with transaction.atomic():
                message = self._get_for_update(message_id)
                if message.status != required_status:
                    logger.warning(
                        f"Refused to mark VoiceOfChange {message.pk} {verb}: status is {message.status}"
                    )
                    raise ApplicationConflict(
                        f"Only {VoiceOfChange.Status(required_status).label.lower()} messages can be {verb}."
                    )

                previous_status = message.status
                apply(message)
                message.save()

                AuditService.log_transition(
                    message,
                    action=f"message_{verb}",
                    from_status=previous_status,
                    to_status=message.status,
                    actor=admin,
                )
                notification_type, title, template = notification
                NotificationService.notify(
                    user=message.submitted_by,
                    notification_type=notification_type,
                    title=title,
                    message=template.format(title=message.title, notes=message.admin_notes),
                    link=f"/voice-of-changes/{message.pk}/",
                )
        except DatabaseError as exc:
            logger.error(f"Failed to mark VoiceOfChange {message_id} {verb}: {exc}")
            raise PersistenceFailure(f"The message could not be {verb}.") from exc

        logger.info(f"VoiceOfChange {message.pk} {verb} by {admin.email}")
        return message

    def _get_for_update(self, message_id):
        try:
            return VoiceOfChange.objects.select_for_update().get(pk=message_id)
        except VoiceOfChange.DoesNotExist:
            raise ApplicationNotFound(f"Message {message_id} does not exist.")
