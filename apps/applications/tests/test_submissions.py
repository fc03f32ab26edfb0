"""Tests for application and message submission."""

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied

from apps.applications.exceptions import (
    ApplicationConflict,
    ApplicationNotFound,
    ApplicationValidationError,
)
from apps.applications.models import (
    InternshipApplication,
    UserApplication,
    VoiceOfChange,
    VolunteerApplication,
)
from apps.applications.services import SubmissionService, UserApplicationReviewService
from apps.core.models import AuditLog

User = get_user_model()


@pytest.fixture
def guest():
    return User.objects.create_user(email="guest@example.com", password="testpass123")


@pytest.fixture
def volunteer_data():
    return {
        "name": "Vera Volunteer",
        "gender": "female",
        "dob": "2001-05-04",
        "address": "1 Main Street",
        "email": "vera@example.com",
        "contact_number": "0123456789",
        "why_volunteer": "I want to help.",
    }


@pytest.mark.django_db
class TestSubmitUserApplication:
    def test_creates_pending_application(self, guest):
        application = SubmissionService.submit_user_application(guest, "Volunteer", {"motivation": "Help out"})

        assert application.is_pending
        assert application.submitted_by == guest
        assert application.application_data == {"motivation": "Help out"}
        assert application.reviewed_by is None
        assert application.processed_at is None
        assert AuditLog.objects.filter(action="application_submitted", resource_id=str(application.pk)).exists()

    @pytest.mark.parametrize("requested", ["Employee", "System Admin", "Guest", "Astronaut"])
    def test_rejects_types_outside_the_requestable_set(self, guest, requested):
        with pytest.raises(ApplicationValidationError) as excinfo:
            SubmissionService.submit_user_application(guest, requested)
        assert "requested_user_type" in excinfo.value.errors
        assert not UserApplication.objects.exists()

    def test_payload_must_be_a_mapping(self, guest):
        with pytest.raises(ApplicationValidationError) as excinfo:
            SubmissionService.submit_user_application(guest, "Member", ["not", "a", "dict"])
        assert "application_data" in excinfo.value.errors

    def test_second_pending_application_is_a_conflict(self, guest):
        SubmissionService.submit_user_application(guest, "Member")
        with pytest.raises(ApplicationConflict, match="pending application"):
            SubmissionService.submit_user_application(guest, "Intern")
        assert UserApplication.objects.count() == 1

    def test_non_guest_is_not_eligible(self):
        member = User.objects.create_user(email="m@example.com", user_type="Member")
        with pytest.raises(ApplicationConflict, match="not eligible"):
            SubmissionService.submit_user_application(member, "Volunteer")

    def test_inactive_guest_is_not_eligible(self, guest):
        guest.status = User.Status.INACTIVE
        guest.save()
        with pytest.raises(ApplicationConflict):
            SubmissionService.submit_user_application(guest, "Member")

    def test_can_reapply_after_rejection(self, guest):
        admin = User.objects.create_user(email="admin@example.com", user_type="System Admin")
        first = SubmissionService.submit_user_application(guest, "Member")
        UserApplicationReviewService().reject(first.pk, admin, "Missing details")

        second = SubmissionService.submit_user_application(guest, "Member")
        assert second.is_pending


@pytest.mark.django_db
class TestCancelUserApplication:
    def test_owner_cancels_pending(self, guest):
        application = SubmissionService.submit_user_application(guest, "Member")
        SubmissionService.cancel_user_application(guest, application.pk)
        assert not UserApplication.objects.exists()

    def test_other_user_cannot_cancel(self, guest):
        application = SubmissionService.submit_user_application(guest, "Member")
        intruder = User.objects.create_user(email="other@example.com")
        with pytest.raises(PermissionDenied):
            SubmissionService.cancel_user_application(intruder, application.pk)
        assert UserApplication.objects.filter(pk=application.pk).exists()

    def test_decided_application_cannot_be_cancelled(self, guest):
        admin = User.objects.create_user(email="admin@example.com", user_type="System Admin")
        application = SubmissionService.submit_user_application(guest, "Member")
        UserApplicationReviewService().approve(application.pk, admin)
        with pytest.raises(ApplicationConflict):
            SubmissionService.cancel_user_application(guest, application.pk)

    def test_missing(self, guest):
        with pytest.raises(ApplicationNotFound):
            SubmissionService.cancel_user_application(guest, 404)


@pytest.mark.django_db
class TestOpportunityApplications:
    def test_anonymous_volunteer_submission(self, volunteer_data):
        application = SubmissionService.submit_volunteer_application(volunteer_data)

        assert isinstance(application, VolunteerApplication)
        assert application.is_pending
        assert application.submitted_by is None
        assert application.name == "Vera Volunteer"

    def test_signed_in_submitter_is_linked(self, guest, volunteer_data):
        application = SubmissionService.submit_volunteer_application(volunteer_data, user=guest)
        assert application.submitted_by == guest

    def test_invalid_fields_are_reported_by_name(self, volunteer_data):
        volunteer_data["email"] = "not-an-email"
        del volunteer_data["name"]

        with pytest.raises(ApplicationValidationError) as excinfo:
            SubmissionService.submit_volunteer_application(volunteer_data)

        assert set(excinfo.value.errors) == {"email", "name"}
        assert not VolunteerApplication.objects.exists()

    def test_internship_duration_is_bounded(self, volunteer_data):
        data = dict(volunteer_data, field_of_interest="Data", duration_months="13")
        with pytest.raises(ApplicationValidationError) as excinfo:
            SubmissionService.submit_internship_application(data)
        assert "duration_months" in excinfo.value.errors

    def test_internship_submission(self, volunteer_data):
        data = dict(volunteer_data, field_of_interest="Data", duration_months="6", available_from="2026-01-05")
        application = SubmissionService.submit_internship_application(data)
        assert isinstance(application, InternshipApplication)
        assert application.duration_months == 6


@pytest.mark.django_db
class TestVoiceOfChangeSubmission:
    def test_submit(self, guest):
        message = SubmissionService.submit_voice_of_change(guest, {"title": "Parks", "message": "More parks"})
        assert message.status == VoiceOfChange.Status.PENDING
        assert message.submitted_by == guest

    def test_inactive_account_cannot_submit(self, guest):
        guest.status = User.Status.INACTIVE
        guest.save()
        with pytest.raises(PermissionDenied):
            SubmissionService.submit_voice_of_change(guest, {"title": "Parks", "message": "More parks"})

    def test_title_is_required(self, guest):
        with pytest.raises(ApplicationValidationError) as excinfo:
            SubmissionService.submit_voice_of_change(guest, {"title": "", "message": "More parks"})
        assert "title" in excinfo.value.errors

    def test_editing_rejected_message_resubmits_it(self, guest):
        message = VoiceOfChange.objects.create(
            submitted_by=guest, title="Parks", message="More parks", status=VoiceOfChange.Status.REJECTED,
            admin_notes="Too short",
        )

        updated = SubmissionService.update_voice_of_change(
            guest, message.pk, {"title": "Parks", "message": "More parks and benches"}
        )

        assert updated.status == VoiceOfChange.Status.PENDING
        assert updated.message == "More parks and benches"

    def test_approved_message_cannot_be_edited(self, guest):
        message = VoiceOfChange.objects.create(
            submitted_by=guest, title="Parks", message="More parks", status=VoiceOfChange.Status.APPROVED
        )
        with pytest.raises(ApplicationConflict):
            SubmissionService.update_voice_of_change(guest, message.pk, {"title": "X", "message": "Y"})

    def test_only_author_can_delete(self, guest):
        message = VoiceOfChange.objects.create(submitted_by=guest, title="Parks", message="More parks")
        other = User.objects.create_user(email="other@example.com")
        with pytest.raises(PermissionDenied):
            SubmissionService.delete_voice_of_change(other, message.pk)

        SubmissionService.delete_voice_of_change(guest, message.pk)
        assert not VoiceOfChange.objects.exists()
