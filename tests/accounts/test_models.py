"""Tests for accounts models."""

import pytest
from django.contrib.auth import get_user_model

from apps.accounts.services import PermissionService

User = get_user_model()


@pytest.mark.django_db
class TestUserModel:
    """Tests for User model."""

    def test_create_user_with_email(self):
        user = User.objects.create_user(
            email="test@example.com",
            password="testpass123",
            first_name="Test",
            last_name="User",
        )
        assert user.email == "test@example.com"
        assert user.check_password("testpass123")
        assert user.is_active
        assert not user.is_staff
        assert user.user_type == User.UserType.GUEST
        assert user.status == User.Status.ACTIVE
        assert user.membership_number is None

    def test_create_user_without_email_raises_error(self):
        with pytest.raises(ValueError, match="Email field must be set"):
            User.objects.create_user(email="", password="testpass123")

    def test_create_superuser_is_system_admin(self):
        user = User.objects.create_superuser(
            email="admin@example.com",
            password="adminpass123",
        )
        assert user.is_staff
        assert user.is_superuser
        assert user.user_type == User.UserType.SYSTEM_ADMIN

    def test_full_name_falls_back_to_email(self):
        user = User(email="test@example.com")
        assert user.full_name == "test@example.com"

    def test_display_name_includes_user_type(self):
        user = User(email="a@example.com", first_name="Ada", last_name="Lovelace", user_type=User.UserType.MEMBER)
        assert user.display_name == "Ada Lovelace (Member)"

    @pytest.mark.parametrize(
        "user_type,expected",
        [
            (User.UserType.GUEST, False),
            (User.UserType.MEMBER, True),
            (User.UserType.VOLUNTEER, True),
            (User.UserType.INTERN, True),
            (User.UserType.EMPLOYEE, True),
            (User.UserType.SYSTEM_ADMIN, False),
        ],
    )
    def test_has_membership_number(self, user_type, expected):
        assert User(email="x@example.com", user_type=user_type).has_membership_number is expected

    def test_only_active_guests_can_apply(self):
        guest = User(email="g@example.com")
        assert guest.can_apply_for_membership

        guest.status = User.Status.INACTIVE
        assert not guest.can_apply_for_membership

        member = User(email="m@example.com", user_type=User.UserType.MEMBER)
        assert not member.can_apply_for_membership

    def test_role(self):
        assert User(email="a@example.com", user_type=User.UserType.SYSTEM_MANAGER).role == "admin"
        assert User(email="b@example.com", user_type=User.UserType.INTERN).role == "member"
        assert User(email="c@example.com").role == "user"

    def test_membership_number_is_unique(self):
        from django.db import IntegrityError

        User.objects.create_user(email="one@example.com", membership_number="M000001")
        with pytest.raises(IntegrityError):
            User.objects.create_user(email="two@example.com", membership_number="M000001")


@pytest.mark.django_db
class TestPermissionService:
    def test_system_manager_is_admin_but_not_system_admin(self):
        manager = User.objects.create_user(email="mgr@example.com", user_type=User.UserType.SYSTEM_MANAGER)
        assert PermissionService.is_admin(manager)
        assert PermissionService.can_approve_applications(manager)
        assert not PermissionService.can_modify_system_settings(manager)

    def test_guest_cannot_approve(self):
        guest = User.objects.create_user(email="guest@example.com")
        assert not PermissionService.can_approve_applications(guest)
        assert not PermissionService.can_manage_members(guest)

    def test_system_admins_group_grants_settings(self):
        from django.contrib.auth.models import Group

        user = User.objects.create_user(email="grp@example.com")
        user.groups.add(Group.objects.create(name="system_admins"))
        assert PermissionService.is_system_admin(user)

    def test_anonymous_user_has_no_capabilities(self):
        from django.contrib.auth.models import AnonymousUser

        anonymous = AnonymousUser()
        assert not PermissionService.is_admin(anonymous)
        assert not PermissionService.can_submit_voice_of_change(anonymous)
