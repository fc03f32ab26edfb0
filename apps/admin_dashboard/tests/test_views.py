"""Tests for admin dashboard views."""

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from apps.applications.models import UserApplication, VoiceOfChange, VolunteerApplication
from apps.core.models import AuditLog, SystemSetting
from apps.members.models import Member

User = get_user_model()


@pytest.fixture
def admin_client(client):
    admin = User.objects.create_user(
        email="manager@example.com",
        password="testpass123",
        user_type=User.UserType.SYSTEM_MANAGER,
    )
    client.force_login(admin)
    client.admin = admin
    return client


@pytest.fixture
def guest():
    return User.objects.create_user(email="guest@example.com", password="testpass123")


@pytest.fixture
def pending_application(guest):
    return UserApplication.objects.create(submitted_by=guest, requested_user_type="Volunteer")


def messages_of(response):
    return [str(m) for m in response.context["messages"]]


@pytest.mark.django_db
class TestAccess:
    def test_anonymous_redirected_to_login(self, client):
        response = client.get(reverse("admin_dashboard:index"))
        assert response.status_code == 302

    def test_guest_forbidden(self, client, guest):
        client.force_login(guest)
        response = client.get(reverse("admin_dashboard:index"))
        assert response.status_code == 403

    def test_guest_cannot_approve(self, client, guest, pending_application):
        client.force_login(guest)
        response = client.post(
            reverse("admin_dashboard:application_approve", args=["user", pending_application.pk])
        )
        assert response.status_code == 403
        pending_application.refresh_from_db()
        assert pending_application.is_pending

    def test_settings_need_system_admin(self, admin_client):
        response = admin_client.get(reverse("admin_dashboard:settings"))
        assert response.status_code == 403


@pytest.mark.django_db
class TestDashboard:
    def test_index(self, admin_client, pending_application):
        response = admin_client.get(reverse("admin_dashboard:index"))
        assert response.status_code == 200
        assert response.context["stats"]["user_applications"]["pending"] == 1

    def test_stats_api(self, admin_client, pending_application):
        response = admin_client.get(reverse("admin_dashboard:stats_api"))
        data = response.json()
        assert data["user_applications"] == {"total": 1, "pending": 1, "approved": 0, "rejected": 0}
        assert data["members"] == {"total": 0, "active": 0}


@pytest.mark.django_db
class TestApplicationReview:
    def test_list_filters_by_status_and_type(self, admin_client, guest, pending_application):
        other = User.objects.create_user(email="other@example.com")
        UserApplication.objects.create(submitted_by=other, requested_user_type="Member")

        response = admin_client.get(
            reverse("admin_dashboard:applications", args=["user"]), {"status": "Pending", "type": "Volunteer"}
        )

        assert response.status_code == 200
        assert list(response.context["applications"]) == [pending_application]
        assert response.context["stats"]["total"] == 2

    def test_list_paginates_by_fifteen(self, admin_client):
        for i in range(16):
            user = User.objects.create_user(email=f"user{i}@example.com")
            UserApplication.objects.create(submitted_by=user, requested_user_type="Member")

        response = admin_client.get(reverse("admin_dashboard:applications", args=["user"]))
        assert len(response.context["applications"]) == 15
        assert response.context["is_paginated"]

    def test_unknown_kind_is_404(self, admin_client):
        response = admin_client.get(reverse("admin_dashboard:applications", args=["astronaut"]))
        assert response.status_code == 404

    def test_approve(self, admin_client, guest, pending_application):
        response = admin_client.post(
            reverse("admin_dashboard:application_approve", args=["user", pending_application.pk]),
            {"admin_notes": "Welcome"},
            follow=True,
        )

        pending_application.refresh_from_db()
        guest.refresh_from_db()
        assert pending_application.is_approved
        assert pending_application.reviewed_by == admin_client.admin
        assert guest.user_type == "Volunteer"
        assert guest.membership_number == "V000001"
        assert "The membership application has been approved." in messages_of(response)

    def test_detail_lists_decision_history(self, admin_client, pending_application):
        admin_client.post(reverse("admin_dashboard:application_approve", args=["user", pending_application.pk]))

        response = admin_client.get(
            reverse("admin_dashboard:application_detail", args=["user", pending_application.pk])
        )

        assert [log.action for log in response.context["history"]] == ["application_approved"]
        assert b"Pending to Approved" in response.content

    def test_reject_without_notes_shows_error(self, admin_client, pending_application):
        response = admin_client.post(
            reverse("admin_dashboard:application_reject", args=["user", pending_application.pk]),
            {"admin_notes": ""},
            follow=True,
        )

        pending_application.refresh_from_db()
        assert pending_application.is_pending
        assert "Admin notes: Notes are required when rejecting." in messages_of(response)

    def test_second_approval_shows_conflict(self, admin_client, pending_application):
        url = reverse("admin_dashboard:application_approve", args=["user", pending_application.pk])
        admin_client.post(url)
        response = admin_client.post(url, follow=True)
        assert "Only pending applications can be approved." in messages_of(response)

    def test_missing_application_is_404(self, admin_client):
        response = admin_client.post(reverse("admin_dashboard:application_approve", args=["user", 999]))
        assert response.status_code == 404

    def test_volunteer_detail_and_delete(self, admin_client):
        application = VolunteerApplication.objects.create(
            name="Vera", gender="female", dob="2001-05-04", address="1 Main Street",
            email="vera@example.com", contact_number="0123",
        )
        detail = admin_client.get(reverse("admin_dashboard:application_detail", args=["volunteer", application.pk]))
        assert detail.status_code == 200

        admin_client.post(reverse("admin_dashboard:application_delete", args=["volunteer", application.pk]))
        assert not VolunteerApplication.objects.exists()


@pytest.mark.django_db
class TestVoiceOfChangeModeration:
    def test_approve_then_unpublish(self, admin_client, guest):
        message = VoiceOfChange.objects.create(submitted_by=guest, title="Parks", message="More parks")

        admin_client.post(reverse("admin_dashboard:voice_of_change_approve", args=[message.pk]))
        message.refresh_from_db()
        assert message.status == VoiceOfChange.Status.APPROVED

        admin_client.post(reverse("admin_dashboard:voice_of_change_unpublish", args=[message.pk]))
        message.refresh_from_db()
        assert message.status == VoiceOfChange.Status.PENDING
        assert not message.published_online

    def test_unpublish_pending_shows_conflict(self, admin_client, guest):
        message = VoiceOfChange.objects.create(submitted_by=guest, title="Parks", message="More parks")
        response = admin_client.post(
            reverse("admin_dashboard:voice_of_change_unpublish", args=[message.pk]), follow=True
        )
        assert "Only approved messages can be unpublished." in messages_of(response)


@pytest.mark.django_db
class TestMemberRegistry:
    def test_create(self, admin_client):
        response = admin_client.post(
            reverse("admin_dashboard:member_create"),
            {"name": "Mina", "email": "mina@example.com", "is_active": "on", "show_email": "on"},
        )
        assert response.status_code == 302
        member = Member.objects.get()
        assert member.membership_id == "MB00001"
        assert member.is_active

    def test_create_with_active_unticked(self, admin_client):
        response = admin_client.post(
            reverse("admin_dashboard:member_create"),
            {"name": "Ina", "email": "ina@example.com"},
        )
        assert response.status_code == 302
        member = Member.objects.get()
        assert not member.is_active

    def test_blank_form_starts_active(self, admin_client):
        response = admin_client.get(reverse("admin_dashboard:member_create"))
        assert response.context["form"]["is_active"].value() is True

    def test_deactivate_and_delete(self, admin_client):
        member = Member.objects.create(membership_id="MB00001", name="Mina", email="mina@example.com", is_active=True)
        url = reverse("admin_dashboard:member_action", args=[member.pk])

        admin_client.post(url, {"action": "deactivate"})
        member.refresh_from_db()
        assert not member.is_active

        admin_client.post(url, {"action": "delete"})
        assert not Member.objects.exists()


@pytest.mark.django_db
class TestAuditLogView:
    def test_filters_by_resource_type(self, admin_client, pending_application):
        AuditLog.objects.create(action="created", resource_type="Member", resource_id="1")
        AuditLog.objects.create(action="application_submitted", resource_type="UserApplication", resource_id="2")

        response = admin_client.get(reverse("admin_dashboard:audit_log"), {"resource_type": "Member"})

        assert response.status_code == 200
        assert [log.resource_type for log in response.context["audit_logs"]] == ["Member"]


@pytest.mark.django_db
class TestSystemSettingsView:
    @pytest.fixture
    def system_admin_client(self, client):
        admin = User.objects.create_user(email="root@example.com", user_type=User.UserType.SYSTEM_ADMIN)
        client.force_login(admin)
        return client

    def test_saves_json_value(self, system_admin_client):
        system_admin_client.post(
            reverse("admin_dashboard:settings"),
            {"key": "support_email", "value": '"help@example.org"', "category": "contact"},
        )
        setting = SystemSetting.objects.get(key="support_email")
        assert setting.value == "help@example.org"
        assert setting.category == SystemSetting.Category.CONTACT

    def test_unknown_category_is_refused(self, system_admin_client):
        response = system_admin_client.post(
            reverse("admin_dashboard:settings"),
            {"key": "brand_name", "value": "X", "category": "secret"},
            follow=True,
        )
        assert not SystemSetting.objects.exists()
        assert "Unknown setting category 'secret'." in messages_of(response)
