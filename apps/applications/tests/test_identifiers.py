"""Tests for sequential identifier generation."""

import pytest
from django.contrib.auth import get_user_model

from apps.applications.services import (
    IdentifierGenerator,
    generate_member_registry_id,
    generate_membership_number,
)
from apps.members.models import Member

User = get_user_model()


def make_user(email, membership_number=None, user_type="Member"):
    return User.objects.create_user(
        email=email,
        password="testpass123",
        user_type=user_type,
        membership_number=membership_number,
    )


@pytest.mark.django_db
class TestMembershipNumbers:
    def test_first_number_for_prefix(self):
        assert generate_membership_number("Volunteer") == "V000001"

    def test_next_after_highest(self):
        make_user("a@example.com", "V000041")
        make_user("b@example.com", "V000042")
        assert generate_membership_number("Volunteer") == "V000043"

    def test_prefixes_are_independent(self):
        make_user("a@example.com", "M000007")
        make_user("b@example.com", "I000002", user_type="Intern")
        assert generate_membership_number("Member") == "M000008"
        assert generate_membership_number("Intern") == "I000003"
        assert generate_membership_number("Employee") == "E000001"

    def test_unknown_type_falls_back_to_member_prefix(self):
        make_user("a@example.com", "M000003")
        assert generate_membership_number("Partner") == "M000004"

    def test_suffixes_compare_as_integers(self):
        # "M0000100" sorts below "M000099" as text but is the larger number
        make_user("a@example.com", "M000099")
        make_user("b@example.com", "M0000100")
        assert generate_membership_number("Member") == "M000101"

    def test_ignores_values_that_only_share_the_prefix(self):
        make_user("a@example.com", "M000005")
        make_user("b@example.com", "MX00900")
        make_user("c@example.com", "M12A")
        assert generate_membership_number("Member") == "M000006"

    def test_gaps_are_not_refilled(self):
        make_user("a@example.com", "M000001")
        make_user("b@example.com", "M000009")
        assert generate_membership_number("Member") == "M000010"

    def test_concurrent_readers_compute_the_same_value(self):
        """The scan does not reserve anything; the unique column is the guard."""
        make_user("a@example.com", "V000042")
        first = IdentifierGenerator.for_user_type("Volunteer")
        second = IdentifierGenerator.for_user_type("Volunteer")
        assert first.next() == second.next() == "V000043"


@pytest.mark.django_db
class TestMemberRegistryIds:
    def test_first_registry_id(self):
        assert generate_member_registry_id() == "MB00001"

    def test_deleted_entries_do_not_cause_reuse(self):
        Member.objects.create(membership_id="MB00001", name="One", email="one@example.com")
        last = Member.objects.create(membership_id="MB00002", name="Two", email="two@example.com")
        Member.objects.create(membership_id="MB00003", name="Three", email="three@example.com")
        Member.objects.filter(pk=last.pk).delete()
        Member.objects.filter(membership_id="MB00001").delete()
        assert generate_member_registry_id() == "MB00004"

    def test_format_pads_to_width(self):
        generator = IdentifierGenerator(Member.objects.all(), "membership_id", "MB", 5)
        assert generator.format(7) == "MB00007"
        assert generator.format(123456) == "MB123456"
