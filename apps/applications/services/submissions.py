"""Submission of applications and voice of change messages."""

import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from django.db import DatabaseError, transaction

from apps.applications.exceptions import (
    ApplicationConflict,
    ApplicationNotFound,
    ApplicationValidationError,
    PersistenceFailure,
)
from apps.applications.forms import (
    REQUESTABLE_USER_TYPES,
    InternshipApplicationForm,
    VoiceOfChangeForm,
    VolunteerApplicationForm,
)
from apps.applications.models import UserApplication, VoiceOfChange
from apps.core.services import AuditService

logger = logging.getLogger(__name__)

User = get_user_model()


def _form_errors(form) -> dict:
    return {field: list(errors) for field, errors in form.errors.items()}


class SubmissionService:
    """Accepts submissions from applicants and stores them as pending."""

    @classmethod
    def submit_user_application(cls, user, requested_user_type: str, application_data=None) -> UserApplication:
        """
        Request reclassification of a guest account.

        Raises:
            ApplicationConflict: user is not eligible or already has a pending request.
            ApplicationValidationError: unknown type or malformed payload.
        """
        allowed_types = {value for value, _ in REQUESTABLE_USER_TYPES}
        errors = {}
        if requested_user_type not in allowed_types:
            errors["requested_user_type"] = [
                f"Select one of: {', '.join(sorted(allowed_types))}."
            ]
        if application_data is not None and not isinstance(application_data, dict):
            errors["application_data"] = ["Application details must be a mapping."]
        if errors:
            raise ApplicationValidationError(errors)

        with transaction.atomic():
            # Lock the applicant so two submissions cannot both pass the pending check
            user = User.objects.select_for_update().get(pk=user.pk)
            if not user.can_apply_for_membership:
                raise ApplicationConflict("You are not eligible to apply for membership at this time.")
            if UserApplication.objects.pending().filter(submitted_by=user).exists():
                raise ApplicationConflict("You already have a pending application.")

            application = UserApplication.objects.create(
                submitted_by=user,
                requested_user_type=requested_user_type,
                application_data=application_data or {},
            )
            AuditService.log(
                action="application_submitted",
                resource_type="UserApplication",
                resource_id=application.pk,
                metadata={"requested_user_type": requested_user_type},
                actor=user,
            )

        logger.info(f"{user.email} applied to become {requested_user_type}")
        return application

    @classmethod
    def cancel_user_application(cls, user, application_id) -> None:
        """Withdraw the user's own pending request."""
        with transaction.atomic():
            try:
                application = UserApplication.objects.select_for_update().get(pk=application_id)
            except UserApplication.DoesNotExist:
                raise ApplicationNotFound(f"Application {application_id} does not exist.")

            if application.submitted_by_id != user.pk:
                raise PermissionDenied("You can only cancel your own applications.")
            if not application.is_pending:
                raise ApplicationConflict("Only pending applications can be cancelled.")

            AuditService.log(
                action="application_cancelled",
                resource_type="UserApplication",
                resource_id=application.pk,
                actor=user,
            )
            application.delete()

        logger.info(f"{user.email} cancelled application {application_id}")

    @classmethod
    def submit_volunteer_application(cls, data, user=None):
        return cls._submit_opportunity(VolunteerApplicationForm(data), user)

    @classmethod
    def submit_internship_application(cls, data, user=None):
        return cls._submit_opportunity(InternshipApplicationForm(data), user)

    @classmethod
    def _submit_opportunity(cls, form, user):
        if not form.is_valid():
            raise ApplicationValidationError(_form_errors(form))

        application = form.save(commit=False)
        if user is not None and user.is_authenticated:
            application.submitted_by = user

        try:
            with transaction.atomic():
                application.save()
                AuditService.log(
                    action="application_submitted",
                    resource_type=application.__class__.__name__,
                    resource_id=application.pk,
                    metadata={"email": application.email},
                    actor=application.submitted_by,
                )
        except DatabaseError as exc:
            logger.error(f"Failed to store {application.kind_label} from {application.email}: {exc}")
            raise PersistenceFailure(f"Your {application.kind_label} could not be saved.") from exc

        logger.info(f"New {application.kind_label} {application.pk} from {application.email}")
        return application

    @classmethod
    def submit_voice_of_change(cls, user, data) -> VoiceOfChange:
        """Store a new message for moderation."""
        if not (user.is_authenticated and user.is_account_active):
            raise PermissionDenied("Only active accounts can submit messages.")

        form = VoiceOfChangeForm(data)
        if not form.is_valid():
            raise ApplicationValidationError(_form_errors(form))

        message = form.save(commit=False)
        message.submitted_by = user
        message.status = VoiceOfChange.Status.PENDING
        with transaction.atomic():
            message.save()
            AuditService.log_create(message, actor=user)

        logger.info(f"{user.email} submitted message {message.pk}")
        return message

    @classmethod
    def update_voice_of_change(cls, user, message_id, data) -> VoiceOfChange:
        """Edit a pending or rejected message; it goes back to pending."""
        with transaction.atomic():
            message = cls._get_own_message(user, message_id)
            if not message.is_editable:
                raise ApplicationConflict("You can only edit pending or rejected messages.")

            form = VoiceOfChangeForm(data, instance=message)
            if not form.is_valid():
                raise ApplicationValidationError(_form_errors(form))

            previous_status = message.status
            message = form.save(commit=False)
            message.status = VoiceOfChange.Status.PENDING
            message.save()
            AuditService.log_update(
                message,
                changes={"status": [previous_status, message.status]},
                actor=user,
            )

        return message

    @classmethod
    def delete_voice_of_change(cls, user, message_id) -> None:
        with transaction.atomic():
            message = cls._get_own_message(user, message_id)
            if not message.is_editable:
                raise ApplicationConflict("You can only delete pending or rejected messages.")
            AuditService.log_delete(message, actor=user)
            message.delete()

    @staticmethod
    def _get_own_message(user, message_id) -> VoiceOfChange:
        try:
            message = VoiceOfChange.objects.select_for_update().get(pk=message_id)
        except VoiceOfChange.DoesNotExist:
            raise ApplicationNotFound(f"Message {message_id} does not exist.")
        if message.submitted_by_id != user.pk:
            raise PermissionDenied("You can only change your own messages.")
        return message
