import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

STATUS_CHOICES = [("Pending", "Pending"), ("Approved", "Approved"), ("Rejected", "Rejected")]
GENDER_CHOICES = [("male", "Male"), ("female", "Female"), ("other", "Other")]


def review_fields(reviews_related_name):
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        ("status", models.CharField(choices=STATUS_CHOICES, db_index=True, default="Pending", max_length=20)),
        ("admin_notes", models.TextField(blank=True)),
        ("processed_at", models.DateTimeField(blank=True, null=True)),
        (
            "reviewed_by",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name=reviews_related_name,
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


def applicant_fields():
    return [
        ("name", models.CharField(max_length=255)),
        ("gender", models.CharField(choices=GENDER_CHOICES, max_length=10)),
        ("dob", models.DateField(verbose_name="date of birth")),
        ("address", models.CharField(max_length=255)),
        ("email", models.EmailField(max_length=255)),
        ("contact_number", models.CharField(max_length=20)),
        ("emergency_contact", models.CharField(blank=True, max_length=255)),
        ("organization", models.CharField(blank=True, max_length=255)),
        ("education_level", models.CharField(blank=True, max_length=255)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserApplication",
            fields=review_fields("userapplication_reviews") + [
                ("requested_user_type", models.CharField(db_index=True, max_length=20)),
                ("application_data", models.JSONField(blank=True, default=dict)),
                (
                    "submitted_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["submitted_by", "status"], name="application_submitt_4e1c2a_idx"),
                    models.Index(fields=["requested_user_type"], name="application_request_7b9d30_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="VolunteerApplication",
            fields=review_fields("volunteerapplication_reviews") + applicant_fields() + [
                ("why_volunteer", models.TextField(blank=True, max_length=1000)),
                (
                    "submitted_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="volunteer_applications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["status"], name="application_vol_status_idx"),
                    models.Index(fields=["created_at"], name="application_vol_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InternshipApplication",
            fields=review_fields("internshipapplication_reviews") + applicant_fields() + [
                ("why_internship", models.TextField(blank=True, max_length=1000)),
                ("field_of_interest", models.CharField(blank=True, max_length=255)),
                ("available_from", models.DateField(blank=True, null=True)),
                (
                    "duration_months",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(12),
                        ],
                    ),
                ),
                (
                    "submitted_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="internship_applications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["status"], name="application_int_status_idx"),
                    models.Index(fields=["created_at"], name="application_int_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="VoiceOfChange",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("message", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")],
                        db_index=True,
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("admin_notes", models.TextField(blank=True)),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("published_online", models.BooleanField(default=False)),
                (
                    "submitted_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="voice_of_changes",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "voice of change",
                "verbose_name_plural": "voice of changes",
                "ordering": ["-created_at"],
            },
        ),
    ]
