"""User model and classification choices."""

from django.contrib.auth.models import AbstractUser
from django.db import models

from .managers import UserManager


class User(AbstractUser):
    """Custom user model using email as the primary identifier."""

    class UserType(models.TextChoices):
        GUEST = "Guest", "Guest"
        MEMBER = "Member", "Member"
        VOLUNTEER = "Volunteer", "Volunteer"
        INTERN = "Intern", "Intern"
        EMPLOYEE = "Employee", "Employee"
        SYSTEM_ADMIN = "System Admin", "System Admin"
        SYSTEM_MANAGER = "System Manager", "System Manager"

    class Status(models.TextChoices):
        PENDING = "Pending", "Pending"
        ACTIVE = "Active", "Active"
        INACTIVE = "Inactive", "Inactive"
        REJECTED = "Rejected", "Rejected"

    class Gender(models.TextChoices):
        MALE = "male", "Male"
        FEMALE = "female", "Female"
        OTHER = "other", "Other"

    # Types that carry a membership number once assigned
    NUMBERED_TYPES = (
        UserType.MEMBER,
        UserType.VOLUNTEER,
        UserType.INTERN,
        UserType.EMPLOYEE,
    )
    ADMIN_TYPES = (UserType.SYSTEM_ADMIN, UserType.SYSTEM_MANAGER)

    # Remove username field, use email instead
    username = None
    email = models.EmailField("email address", unique=True)

    user_type = models.CharField(
        max_length=20,
        choices=UserType.choices,
        default=UserType.GUEST,
        db_index=True,
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
    )
    membership_number = models.CharField(
        max_length=20,
        unique=True,
        null=True,
        blank=True,
        editable=False,
    )

    # Profile
    phone = models.CharField(max_length=30, blank=True)
    address = models.CharField(max_length=255, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=Gender.choices, blank=True)
    designation = models.CharField(max_length=100, blank=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name", "last_name"]

    objects = UserManager()

    class Meta:
        ordering = ["email"]
        indexes = [
            models.Index(fields=["email"], name="accounts_us_email_74c8d6_idx"),
            models.Index(fields=["status"], name="accounts_us_status_bb3d2d_idx"),
        ]

    def __str__(self):
        return self.email

    @property
    def full_name(self):
        """Return the user's full name."""
        return f"{self.first_name} {self.last_name}".strip() or self.email

    @property
    def display_name(self):
        """Return the user's name together with their classification."""
        return f"{self.full_name} ({self.user_type})"

    @property
    def is_admin(self):
        """System Admins and System Managers administer the site."""
        return self.user_type in self.ADMIN_TYPES

    @property
    def is_system_admin(self):
        return self.user_type == self.UserType.SYSTEM_ADMIN

    @property
    def is_guest(self):
        return self.user_type == self.UserType.GUEST

    @property
    def is_account_active(self):
        """Check both the lifecycle status and Django's login flag."""
        return self.status == self.Status.ACTIVE and self.is_active

    @property
    def has_membership_number(self):
        """Check if the current classification carries a membership number."""
        return self.user_type in self.NUMBERED_TYPES

    @property
    def can_apply_for_membership(self):
        """Only active guests may request a new classification."""
        return self.is_guest and self.status == self.Status.ACTIVE

    @property
    def role(self):
        """Coarse role kept for older templates: admin, member or user."""
        if self.is_admin:
            return "admin"
        if self.has_membership_number:
            return "member"
        return "user"
