import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Member",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("membership_id", models.CharField(editable=False, max_length=20, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("member_since", models.DateField(blank=True, null=True)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("phone", models.CharField(blank=True, max_length=50)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("description", models.TextField(blank=True)),
                (
                    "photo",
                    models.FileField(
                        blank=True,
                        upload_to="members/",
                        validators=[
                            django.core.validators.FileExtensionValidator(["jpg", "jpeg", "png", "gif", "webp"])
                        ],
                    ),
                ),
                ("show_phone", models.BooleanField(default=True)),
                ("show_email", models.BooleanField(default=True)),
                ("is_active", models.BooleanField(default=False)),
                ("is_lifetime_member", models.BooleanField(default=False)),
                ("is_self_registered", models.BooleanField(default=False)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["is_active"], name="members_mem_is_acti_2f6c18_idx"),
                ],
            },
        ),
    ]
