"""Management command to set up the system admin group."""

from django.contrib.auth.models import Group, Permission
from django.contrib.contenttypes.models import ContentType
from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import User

GROUP_NAME = "system_admins"

MANAGED_MODELS = [
    ("accounts", "user"),
    ("applications", "userapplication"),
    ("applications", "volunteerapplication"),
    ("applications", "internshipapplication"),
    ("applications", "voiceofchange"),
    ("members", "member"),
    ("core", "auditlog"),
    ("core", "systemsetting"),
    ("notifications", "notification"),
]


class Command(BaseCommand):
    help = "Create the system_admins group and optionally promote a user to System Admin"

    def add_arguments(self, parser):
        parser.add_argument(
            "--add-user",
            type=str,
            help="Email of user to promote to System Admin",
        )

    def handle(self, *args, **options):
        group, created = Group.objects.get_or_create(name=GROUP_NAME)

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created {GROUP_NAME} group"))
        else:
            self.stdout.write(f"{GROUP_NAME} group already exists")

        permissions_added = 0
        for app_label, model in MANAGED_MODELS:
            try:
                content_type = ContentType.objects.get(app_label=app_label, model=model)
            except ContentType.DoesNotExist:
                self.stdout.write(self.style.WARNING(f"ContentType not found: {app_label}.{model}"))
                continue

            existing = set(group.permissions.values_list("pk", flat=True))
            for perm in Permission.objects.filter(content_type=content_type):
                if perm.pk not in existing:
                    group.permissions.add(perm)
                    permissions_added += 1

        self.stdout.write(self.style.SUCCESS(f"Added {permissions_added} permissions to {GROUP_NAME}"))

        email = options["add_user"]
        if email:
            try:
                user = User.objects.get(email=email)
            except User.DoesNotExist:
                raise CommandError(f"User not found: {email}")

            user.groups.add(group)
            user.user_type = User.UserType.SYSTEM_ADMIN
            user.status = User.Status.ACTIVE
            user.is_staff = True  # Grant staff access for Django admin
            user.save(update_fields=["user_type", "status", "is_staff"])
            self.stdout.write(self.style.SUCCESS(f"Promoted {user.email} to System Admin"))
