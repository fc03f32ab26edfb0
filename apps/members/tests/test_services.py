"""Tests for the member registry service."""

import os

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.applications.exceptions import ApplicationValidationError
from apps.core.models import AuditLog
from apps.members.models import Member
from apps.members.services import MemberService

User = get_user_model()

# Smallest valid GIF
GIF_BYTES = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00"
    b"\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


@pytest.fixture
def admin_user():
    return User.objects.create_user(email="admin@example.com", user_type="System Admin")


@pytest.fixture
def member_data():
    return {
        "name": "Mina Member",
        "email": "mina@example.com",
        "phone": "0123456789",
        "address": "2 High Street",
        "description": "Founding member",
        "show_phone": True,
        "show_email": False,
    }


def photo(name="photo.gif", content=GIF_BYTES, content_type="image/gif"):
    return SimpleUploadedFile(name, content, content_type=content_type)


@pytest.mark.django_db
class TestCreateMember:
    def test_create_assigns_registry_id(self, member_data, admin_user):
        member = MemberService.create(dict(member_data, is_active=True), actor=admin_user)

        assert member.membership_id == "MB00001"
        assert member.member_since is not None
        assert member.is_active
        assert not member.is_self_registered
        assert AuditLog.objects.filter(resource_type="Member", action="created").exists()

    def test_ids_continue_after_deletion(self, member_data, admin_user):
        first = MemberService.create(member_data, actor=admin_user)
        MemberService.create(dict(member_data, email="second@example.com"), actor=admin_user)
        MemberService.delete(first, actor=admin_user)

        third = MemberService.create(dict(member_data, email="third@example.com"), actor=admin_user)
        assert third.membership_id == "MB00003"

    def test_explicit_inactive(self, member_data):
        member = MemberService.create(dict(member_data, is_active=False))
        assert not member.is_active

    def test_missing_active_flag_means_inactive(self, member_data):
        member = MemberService.create(member_data)
        assert not member.is_active

    def test_email_must_be_unique(self, member_data):
        MemberService.create(member_data)
        with pytest.raises(ApplicationValidationError) as excinfo:
            MemberService.create(member_data)
        assert "email" in excinfo.value.errors
        assert Member.objects.count() == 1

    def test_photo_is_stored_under_members(self, member_data):
        member = MemberService.create(member_data, photo=photo())
        assert member.photo.name.startswith("members/")
        assert os.path.exists(member.photo.path)

    def test_oversized_photo_is_refused(self, member_data, settings):
        settings.MEMBER_PHOTO_MAX_BYTES = 10
        with pytest.raises(ApplicationValidationError) as excinfo:
            MemberService.create(member_data, photo=photo())
        assert "photo" in excinfo.value.errors

    def test_non_image_extension_is_refused(self, member_data):
        with pytest.raises(ApplicationValidationError) as excinfo:
            MemberService.create(member_data, photo=photo("notes.txt", b"hello", "text/plain"))
        assert "photo" in excinfo.value.errors


@pytest.mark.django_db
class TestSignup:
    def test_signup_is_inactive_and_self_registered(self, member_data):
        member = MemberService.signup(dict(member_data, is_active=True))
        assert not member.is_active
        assert member.is_self_registered
        assert member.membership_id == "MB00001"


@pytest.mark.django_db
class TestUpdateAndDelete:
    def test_new_photo_replaces_old_file(self, member_data):
        member = MemberService.create(member_data, photo=photo("first.gif"))
        old_path = member.photo.path

        member = MemberService.update(member, dict(member_data, is_active=True), photo=photo("second.gif"))

        assert not os.path.exists(old_path)
        assert os.path.exists(member.photo.path)

    def test_update_keeps_registry_id(self, member_data):
        member = MemberService.create(member_data)
        updated = MemberService.update(member, dict(member_data, name="Mina M.", is_active=True))
        assert updated.membership_id == "MB00001"
        assert updated.name == "Mina M."

    def test_delete_removes_photo(self, member_data):
        member = MemberService.create(member_data, photo=photo())
        path = member.photo.path

        MemberService.delete(member)

        assert not Member.objects.exists()
        assert not os.path.exists(path)

    def test_activate_and_deactivate(self, member_data, admin_user):
        member = MemberService.signup(member_data)

        MemberService.activate(member, actor=admin_user)
        member.refresh_from_db()
        assert member.is_active

        MemberService.deactivate(member, actor=admin_user)
        member.refresh_from_db()
        assert not member.is_active
        assert AuditLog.objects.filter(resource_type="Member", action="updated").count() == 2
