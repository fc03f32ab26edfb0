"""Tests for account views."""

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from apps.core.models import AuditLog

User = get_user_model()


@pytest.mark.django_db
class TestRegisterView:
    def test_register_creates_active_guest(self, client):
        response = client.post(
            reverse("accounts:register"),
            {
                "email": "new@example.com",
                "first_name": "New",
                "last_name": "Person",
                "phone": "0123",
                "password1": "a-Strong-pass-42",
                "password2": "a-Strong-pass-42",
            },
        )

        assert response.status_code == 302
        user = User.objects.get(email="new@example.com")
        assert user.user_type == User.UserType.GUEST
        assert user.can_apply_for_membership
        assert AuditLog.objects.filter(action="registered", resource_id=str(user.pk)).exists()
        assert response.url == reverse("applications:create")

    def test_email_is_unique_regardless_of_case(self, client):
        User.objects.create_user(email="taken@example.com", password="testpass123")

        response = client.post(
            reverse("accounts:register"),
            {
                "email": "Taken@Example.com",
                "first_name": "Copy",
                "last_name": "Cat",
                "password1": "a-Strong-pass-42",
                "password2": "a-Strong-pass-42",
            },
        )

        assert response.status_code == 200
        assert "email" in response.context["form"].errors
        assert User.objects.count() == 1

    def test_login_page(self, client):
        response = client.get(reverse("accounts:login"))
        assert response.status_code == 200


@pytest.mark.django_db
class TestUserDashboard:
    def test_dashboard_shows_apply_link_for_guest(self, client):
        user = User.objects.create_user(email="guest@example.com", password="testpass123")
        client.force_login(user)

        response = client.get(reverse("core:dashboard"))

        assert response.status_code == 200
        assert response.context["can_apply"]
        assert response.context["pending_application"] is None

    def test_home_is_public(self, client):
        response = client.get(reverse("core:home"))
        assert response.status_code == 200

    def test_admin_is_sent_to_admin_dashboard(self, client):
        admin = User.objects.create_user(email="admin@example.com", user_type=User.UserType.SYSTEM_MANAGER)
        client.force_login(admin)

        response = client.get(reverse("core:dashboard"))

        assert response.status_code == 302
        assert response.url == reverse("admin_dashboard:index")


@pytest.mark.django_db
class TestLogout:
    def test_logout_is_audited(self, client):
        user = User.objects.create_user(email="guest@example.com", password="testpass123")
        client.force_login(user)

        response = client.post(reverse("accounts:logout"))

        assert response.status_code == 302
        assert AuditLog.objects.filter(action="logged_out", actor=user).exists()
