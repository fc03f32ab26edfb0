"""Services package for application submission, review and identifiers."""

from apps.applications.services.identifiers import (
    IdentifierGenerator,
    generate_member_registry_id,
    generate_membership_number,
)
from apps.applications.services.review import (
    InternshipReviewService,
    ReviewService,
    UserApplicationReviewService,
    VoiceOfChangeReviewService,
    VolunteerReviewService,
)
from apps.applications.services.submissions import SubmissionService

__all__ = [
    "IdentifierGenerator",
    "InternshipReviewService",
    "ReviewService",
    "SubmissionService",
    "UserApplicationReviewService",
    "VoiceOfChangeReviewService",
    "VolunteerReviewService",
    "generate_member_registry_id",
    "generate_membership_number",
]
