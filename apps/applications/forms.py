"""Forms for application submissions."""

from django import forms

from apps.applications.models import (
    InternshipApplication,
    VoiceOfChange,
    VolunteerApplication,
)

REQUESTABLE_USER_TYPES = [
    ("Member", "Member"),
    ("Volunteer", "Volunteer"),
    ("Intern", "Intern"),
]

APPLICANT_FIELDS = [
    "name",
    "gender",
    "dob",
    "address",
    "email",
    "contact_number",
    "emergency_contact",
    "organization",
    "education_level",
]


class StyledFormMixin:
    """Apply the shared input class to every widget."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.widget.attrs.setdefault("class", "input")


class UserApplicationForm(StyledFormMixin, forms.Form):
    """Guest request to become a Member, Volunteer or Intern."""

    requested_user_type = forms.ChoiceField(choices=REQUESTABLE_USER_TYPES)
    motivation = forms.CharField(
        required=False,
        max_length=1000,
        widget=forms.Textarea(attrs={"rows": 4}),
    )

    def application_data(self) -> dict:
        """Free-form answers stored alongside the request."""
        motivation = self.cleaned_data.get("motivation")
        return {"motivation": motivation} if motivation else {}


class VolunteerApplicationForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = VolunteerApplication
        fields = APPLICANT_FIELDS + ["why_volunteer"]
        widgets = {
            "dob": forms.DateInput(attrs={"type": "date"}),
            "why_volunteer": forms.Textarea(attrs={"rows": 4}),
        }


class InternshipApplicationForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = InternshipApplication
        fields = APPLICANT_FIELDS + [
            "why_internship",
            "field_of_interest",
            "available_from",
            "duration_months",
        ]
        widgets = {
            "dob": forms.DateInput(attrs={"type": "date"}),
            "available_from": forms.DateInput(attrs={"type": "date"}),
            "why_internship": forms.Textarea(attrs={"rows": 4}),
        }


class VoiceOfChangeForm(StyledFormMixin, forms.ModelForm):
    class Meta:
        model = VoiceOfChange
        fields = ["title", "message"]
        widgets = {
            "message": forms.Textarea(attrs={"rows": 8}),
        }


class ReviewDecisionForm(StyledFormMixin, forms.Form):
    """Reviewer notes posted with approve/reject actions."""

    admin_notes = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Notes for the applicant..."}),
    )
