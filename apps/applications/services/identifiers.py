"""Sequential, human readable identifiers such as M000042 or MB00007."""

import logging
import re

from django.db.models import QuerySet

logger = logging.getLogger(__name__)

MEMBERSHIP_NUMBER_WIDTH = 6
MEMBER_REGISTRY_PREFIX = "MB"
MEMBER_REGISTRY_WIDTH = 5

USER_TYPE_PREFIXES = {
    "Member": "M",
    "Volunteer": "V",
    "Intern": "I",
    "Employee": "E",
}
DEFAULT_PREFIX = "M"


class IdentifierGenerator:
    """
    Produce the next identifier for a prefix by scanning stored values.

    The highest existing suffix is found by comparing suffixes as integers,
    so M0000100 ranks above M000099 even though it sorts lower as text.
    Values that are not exactly ``prefix + digits`` are ignored.

    The scan does not lock anything. Two writers reading the same snapshot
    compute the same next value; the unique constraint on the target column
    is what stops the second one from being stored.
    """

    def __init__(self, queryset: QuerySet, field: str, prefix: str, width: int):
        self.queryset = queryset
        self.field = field
        self.prefix = prefix
        self.width = width
        self._pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")

    @classmethod
    def for_user_type(cls, user_type: str) -> "IdentifierGenerator":
        """Generator for user membership numbers of the given classification."""
        from apps.accounts.models import User

        prefix = USER_TYPE_PREFIXES.get(user_type, DEFAULT_PREFIX)
        return cls(User.objects.all(), "membership_number", prefix, MEMBERSHIP_NUMBER_WIDTH)

    @classmethod
    def for_member_registry(cls) -> "IdentifierGenerator":
        """Generator for member registry IDs (MB00001, MB00002, ...)."""
        from apps.members.models import Member

        return cls(Member.objects.all(), "membership_id", MEMBER_REGISTRY_PREFIX, MEMBER_REGISTRY_WIDTH)

    def current_max(self) -> int:
        """Return the highest numeric suffix in use, or 0 when none exists."""
        values = self.queryset.filter(
            **{f"{self.field}__startswith": self.prefix}
        ).values_list(self.field, flat=True)

        highest = 0
        for value in values:
            match = self._pattern.match(value or "")
            if match:
                highest = max(highest, int(match.group(1)))
        return highest

    def format(self, number: int) -> str:
        return f"{self.prefix}{number:0{self.width}d}"

    def next(self) -> str:
        identifier = self.format(self.current_max() + 1)
        logger.debug(f"Generated identifier {identifier} for {self.field}")
        return identifier


def generate_membership_number(user_type: str) -> str:
    """Next membership number for a user classification, e.g. V000043."""
    return IdentifierGenerator.for_user_type(user_type).next()


def generate_member_registry_id() -> str:
    """Next member registry ID, e.g. MB00012."""
    return IdentifierGenerator.for_member_registry().next()
