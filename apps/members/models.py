"""Public member registry."""

from django.core.validators import FileExtensionValidator
from django.db import models

from apps.core.models import TimeStampedModel

PHOTO_EXTENSIONS = ["jpg", "jpeg", "png", "gif", "webp"]


class MemberQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def self_registered(self):
        return self.filter(is_self_registered=True)

    def recent(self):
        return self.order_by("-created_at")


class Member(TimeStampedModel):
    """
    Registry entry shown on the public members page.

    Entries are independent of user accounts. The membership ID (MB00001)
    is issued once on creation and never edited.
    """

    membership_id = models.CharField(max_length=20, unique=True, editable=False)
    name = models.CharField(max_length=255)
    member_since = models.DateField(null=True, blank=True)

    address = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    email = models.EmailField(unique=True)
    description = models.TextField(blank=True)
    photo = models.FileField(
        upload_to="members/",
        blank=True,
        validators=[FileExtensionValidator(PHOTO_EXTENSIONS)],
    )

    # Visibility on the public page
    show_phone = models.BooleanField(default=True)
    show_email = models.BooleanField(default=True)

    is_active = models.BooleanField(default=False)
    is_lifetime_member = models.BooleanField(default=False)
    is_self_registered = models.BooleanField(default=False)

    objects = MemberQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_active"], name="members_mem_is_acti_2f6c18_idx"),
        ]

    def __str__(self):
        return f"{self.membership_id} {self.name}"

    @property
    def public_phone(self):
        return self.phone if self.show_phone else ""

    @property
    def public_email(self):
        return self.email if self.show_email else ""
