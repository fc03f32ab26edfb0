"""Application records awaiting administrative review."""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import TimeStampedModel


class ApplicationQuerySet(models.QuerySet):
    def pending(self):
        return self.filter(status=ReviewableApplication.Status.PENDING)

    def approved(self):
        return self.filter(status=ReviewableApplication.Status.APPROVED)

    def rejected(self):
        return self.filter(status=ReviewableApplication.Status.REJECTED)

    def recent(self):
        return self.order_by("-created_at")

    def status_counts(self) -> dict:
        """Totals per status, as shown on the review index pages."""
        return {
            "total": self.count(),
            "pending": self.pending().count(),
            "approved": self.approved().count(),
            "rejected": self.rejected().count(),
        }


class ReviewableApplication(TimeStampedModel):
    """
    Abstract base for records that go through a single review decision.

    Lifecycle: Pending -> Approved | Rejected. Both outcomes are terminal.
    reviewed_by and processed_at are set exactly when the record leaves
    Pending, and only the review services write them.
    """

    class Status(models.TextChoices):
        PENDING = "Pending", "Pending"
        APPROVED = "Approved", "Approved"
        REJECTED = "Rejected", "Rejected"

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    admin_notes = models.TextField(blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)s_reviews",
    )
    processed_at = models.DateTimeField(null=True, blank=True)

    objects = ApplicationQuerySet.as_manager()

    # Human readable kind used in messages and notifications
    kind_label = "application"

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    @property
    def is_pending(self):
        return self.status == self.Status.PENDING

    @property
    def is_approved(self):
        return self.status == self.Status.APPROVED

    @property
    def is_rejected(self):
        return self.status == self.Status.REJECTED

    @property
    def applicant(self):
        """The account that submitted the record, if any."""
        return self.submitted_by

    def clean(self):
        super().clean()
        reviewed = self.reviewed_by_id is not None or self.processed_at is not None
        if self.is_pending and reviewed:
            raise ValidationError("A pending application cannot carry review details.")
        if not self.is_pending and (self.reviewed_by_id is None or self.processed_at is None):
            raise ValidationError("A reviewed application must record its reviewer and time.")


class UserApplication(ReviewableApplication):
    """Request by a guest account to be reclassified (Member, Volunteer, Intern)."""

    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="applications",
    )
    requested_user_type = models.CharField(max_length=20, db_index=True)
    application_data = models.JSONField(default=dict, blank=True)

    kind_label = "membership application"

    class Meta(ReviewableApplication.Meta):
        indexes = [
            models.Index(fields=["submitted_by", "status"], name="application_submitt_4e1c2a_idx"),
            models.Index(fields=["requested_user_type"], name="application_request_7b9d30_idx"),
        ]

    def __str__(self):
        return f"{self.submitted_by.email} -> {self.requested_user_type} ({self.status})"


class ApplicantDetails(models.Model):
    """Contact fields shared by the public opportunity forms."""

    class Gender(models.TextChoices):
        MALE = "male", "Male"
        FEMALE = "female", "Female"
        OTHER = "other", "Other"

    name = models.CharField(max_length=255)
    gender = models.CharField(max_length=10, choices=Gender.choices)
    dob = models.DateField("date of birth")
    address = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    contact_number = models.CharField(max_length=20)
    emergency_contact = models.CharField(max_length=255, blank=True)
    organization = models.CharField(max_length=255, blank=True)
    education_level = models.CharField(max_length=255, blank=True)

    class Meta:
        abstract = True


class VolunteerApplication(ReviewableApplication, ApplicantDetails):
    """Application submitted through the public volunteer form."""

    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="volunteer_applications",
    )
    why_volunteer = models.TextField(max_length=1000, blank=True)

    kind_label = "volunteer application"

    class Meta(ReviewableApplication.Meta):
        indexes = [
            models.Index(fields=["status"], name="application_vol_status_idx"),
            models.Index(fields=["created_at"], name="application_vol_created_idx"),
        ]

    def __str__(self):
        return f"Volunteer: {self.name} ({self.status})"


class InternshipApplication(ReviewableApplication, ApplicantDetails):
    """Application submitted through the public internship form."""

    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="internship_applications",
    )
    why_internship = models.TextField(max_length=1000, blank=True)
    field_of_interest = models.CharField(max_length=255, blank=True)
    available_from = models.DateField(null=True, blank=True)
    duration_months = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(12)],
    )

    kind_label = "internship application"

    class Meta(ReviewableApplication.Meta):
        indexes = [
            models.Index(fields=["status"], name="application_int_status_idx"),
            models.Index(fields=["created_at"], name="application_int_created_idx"),
        ]

    def __str__(self):
        return f"Internship: {self.name} ({self.status})"


class VoiceOfChangeQuerySet(models.QuerySet):
    def pending(self):
        return self.filter(status=VoiceOfChange.Status.PENDING)

    def approved(self):
        return self.filter(status=VoiceOfChange.Status.APPROVED)

    def rejected(self):
        return self.filter(status=VoiceOfChange.Status.REJECTED)

    def published(self):
        return self.approved().filter(
            published_at__isnull=False,
            published_at__lte=timezone.now(),
        )

    def recent(self):
        return self.order_by("-created_at")


class VoiceOfChange(TimeStampedModel):
    """
    Message submitted by a member for publication on the public site.

    Moderation differs from the application records: an approved message
    can be unpublished back to pending, and authors may edit pending or
    rejected messages, which puts them back in the queue.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    EDITABLE_STATUSES = (Status.PENDING, Status.REJECTED)

    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="voice_of_changes",
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    admin_notes = models.TextField(blank=True)
    published_at = models.DateTimeField(null=True, blank=True)
    published_online = models.BooleanField(default=False)

    objects = VoiceOfChangeQuerySet.as_manager()

    kind_label = "message"

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "voice of change"
        verbose_name_plural = "voice of changes"

    def __str__(self):
        return f"{self.title} ({self.status})"

    @property
    def applicant(self):
        return self.submitted_by

    @property
    def is_editable(self):
        return self.status in self.EDITABLE_STATUSES

    @property
    def is_published(self):
        return (
            self.status == self.Status.APPROVED
            and self.published_at is not None
            and self.published_at <= timezone.now()
        )
