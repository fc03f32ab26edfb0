"""Member registry operations."""

import logging

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.applications.exceptions import ApplicationValidationError, PersistenceFailure
from apps.applications.services.identifiers import generate_member_registry_id
from apps.core.services import AuditService
from apps.members.forms import MemberForm, MemberSignupForm
from apps.members.models import Member

logger = logging.getLogger(__name__)


def _photo_files(photo) -> dict:
    return {"photo": photo} if photo else {}


def _delete_stored_photo(name: str) -> None:
    """Remove a replaced or orphaned photo from storage."""
    if not name:
        return
    storage = Member._meta.get_field("photo").storage
    if storage.exists(name):
        storage.delete(name)
        logger.debug(f"Deleted member photo {name}")


class MemberService:
    """Create, update and remove registry entries."""

    @classmethod
    def create(cls, data, photo=None, actor=None) -> Member:
        """Enroll a member from the admin dashboard; an absent is_active means inactive."""
        form = MemberForm(data, _photo_files(photo))
        return cls._create(form, actor, is_self_registered=False)

    @classmethod
    def signup(cls, data, photo=None) -> Member:
        """Self-registration; the entry stays inactive until an admin activates it."""
        form = MemberSignupForm(data, _photo_files(photo))
        return cls._create(form, None, is_self_registered=True)

    @classmethod
    def _create(cls, form, actor, is_self_registered: bool) -> Member:
        if not form.is_valid():
            raise ApplicationValidationError({f: list(e) for f, e in form.errors.items()})

        member = form.save(commit=False)
        member.member_since = timezone.localdate()
        member.is_self_registered = is_self_registered
        if is_self_registered:
            member.is_active = False

        try:
            with transaction.atomic():
                member.membership_id = generate_member_registry_id()
                member.save()
                AuditService.log_create(member, actor=actor)
        except DatabaseError as exc:
            # The photo was written before the failed insert
            _delete_stored_photo(member.photo.name)
            logger.error(f"Failed to create member {member.email}: {exc}")
            raise PersistenceFailure("The member could not be saved.") from exc

        logger.info(f"Member {member.membership_id} created for {member.email}")
        return member

    @classmethod
    def update(cls, member: Member, data, photo=None, actor=None) -> Member:
        """Edit an entry; a new photo replaces and deletes the old one."""
        old_photo = member.photo.name
        form = MemberForm(data, _photo_files(photo), instance=member)
        if not form.is_valid():
            raise ApplicationValidationError({f: list(e) for f, e in form.errors.items()})

        changes = {
            field: [str(form.initial.get(field)), str(form.cleaned_data.get(field))]
            for field in form.changed_data
        }
        try:
            with transaction.atomic():
                member = form.save()
                AuditService.log_update(member, changes=changes, actor=actor)
        except DatabaseError as exc:
            logger.error(f"Failed to update member {member.membership_id}: {exc}")
            raise PersistenceFailure("The member could not be updated.") from exc

        if photo and old_photo and old_photo != member.photo.name:
            _delete_stored_photo(old_photo)
        return member

    @classmethod
    def delete(cls, member: Member, actor=None) -> None:
        photo = member.photo.name
        with transaction.atomic():
            AuditService.log_delete(member, actor=actor)
            member.delete()
        _delete_stored_photo(photo)
        logger.info(f"Member {member.membership_id} deleted")

    @classmethod
    def activate(cls, member: Member, actor=None) -> Member:
        return cls._set_active(member, True, actor)

    @classmethod
    def deactivate(cls, member: Member, actor=None) -> Member:
        return cls._set_active(member, False, actor)

    @classmethod
    def _set_active(cls, member: Member, active: bool, actor) -> Member:
        if member.is_active == active:
            return member
        with transaction.atomic():
            member.is_active = active
            member.save(update_fields=["is_active", "updated_at"])
            AuditService.log_update(member, changes={"is_active": [not active, active]}, actor=actor)
        return member
