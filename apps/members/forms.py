"""Forms for the member registry."""

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError

from apps.members.models import Member


class MemberForm(forms.ModelForm):
    """Admin form for creating and editing registry entries."""

    class Meta:
        model = Member
        fields = [
            "name", "email", "phone", "address", "description", "photo",
            "is_active", "is_lifetime_member", "show_phone", "show_email",
        ]
        widgets = {
            "name": forms.TextInput(attrs={"class": "input"}),
            "email": forms.EmailInput(attrs={"class": "input"}),
            "phone": forms.TextInput(attrs={"class": "input"}),
            "address": forms.TextInput(attrs={"class": "input"}),
            "description": forms.Textarea(attrs={"class": "input", "rows": 4}),
            "photo": forms.FileInput(attrs={"class": "input", "accept": "image/*"}),
        }

    def clean_photo(self):
        photo = self.cleaned_data.get("photo")
        # Only newly uploaded files carry a content_type
        if photo and hasattr(photo, "content_type"):
            max_bytes = settings.MEMBER_PHOTO_MAX_BYTES
            if photo.size > max_bytes:
                raise ValidationError(
                    f"Photo size ({photo.size / 1024:.0f}KB) exceeds maximum ({max_bytes // 1024}KB)."
                )
            if not photo.content_type.startswith("image/"):
                raise ValidationError("Photo must be an image.")
        return photo


class MemberSignupForm(MemberForm):
    """Public self-registration; visibility and status are left to admins."""

    class Meta(MemberForm.Meta):
        fields = ["name", "email", "phone", "address", "description", "photo"]
