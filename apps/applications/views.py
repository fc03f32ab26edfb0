"""Views for applicants: membership requests, opportunity forms and messages."""

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views import View
from django.views.generic import DetailView, ListView

from apps.applications.forms import (
    InternshipApplicationForm,
    UserApplicationForm,
    VoiceOfChangeForm,
    VolunteerApplicationForm,
)
from apps.applications.mixins import HANDLED_ERRORS, ServiceErrorMixin
from apps.applications.models import UserApplication, VoiceOfChange
from apps.applications.services import SubmissionService
from apps.core.mixins import LoginRequiredMixin


class UserApplicationListView(LoginRequiredMixin, ListView):
    """The current user's membership applications."""

    template_name = "applications/user_application_list.html"
    context_object_name = "applications"

    def get_queryset(self):
        return (
            UserApplication.objects.filter(submitted_by=self.request.user)
            .select_related("reviewed_by")
            .recent()
        )


class UserApplicationCreateView(LoginRequiredMixin, ServiceErrorMixin, View):
    """Form for a guest to request a new classification."""

    template_name = "applications/user_application_form.html"

    def get(self, request):
        user = request.user
        if not user.can_apply_for_membership:
            messages.error(request, "You are not eligible to apply for membership at this time.")
            return redirect("core:dashboard")
        if UserApplication.objects.pending().filter(submitted_by=user).exists():
            messages.error(request, "You already have a pending application.")
            return redirect("applications:index")
        return render(request, self.template_name, {"form": UserApplicationForm()})

    def post(self, request):
        form = UserApplicationForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form})

        try:
            SubmissionService.submit_user_application(
                request.user,
                form.cleaned_data["requested_user_type"],
                form.application_data(),
            )
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("applications:index")

        messages.success(request, "Your application has been submitted successfully.")
        return redirect("applications:index")


class UserApplicationDetailView(LoginRequiredMixin, DetailView):
    template_name = "applications/user_application_detail.html"
    context_object_name = "application"

    def get_queryset(self):
        # Applicants only see their own applications
        return UserApplication.objects.filter(submitted_by=self.request.user).select_related("reviewed_by")


class UserApplicationCancelView(LoginRequiredMixin, ServiceErrorMixin, View):
    def post(self, request, pk):
        try:
            SubmissionService.cancel_user_application(request.user, pk)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("applications:index")

        messages.success(request, "Application cancelled successfully.")
        return redirect("applications:index")


class OpportunityApplicationView(ServiceErrorMixin, View):
    """Public volunteer / internship form; no account required."""

    form_class = None
    template_name = None
    submit = None
    success_message = ""

    def get(self, request):
        return render(request, self.template_name, {"form": self.form_class()})

    def post(self, request):
        try:
            self.submit(request.POST, user=request.user)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return render(request, self.template_name, {"form": self.form_class(request.POST)})

        messages.success(request, self.success_message)
        return redirect(request.path)


class VolunteerApplicationCreateView(OpportunityApplicationView):
    form_class = VolunteerApplicationForm
    template_name = "applications/volunteer_form.html"
    submit = staticmethod(SubmissionService.submit_volunteer_application)
    success_message = "Your volunteer application has been submitted successfully!"


class InternshipApplicationCreateView(OpportunityApplicationView):
    form_class = InternshipApplicationForm
    template_name = "applications/internship_form.html"
    submit = staticmethod(SubmissionService.submit_internship_application)
    success_message = "Your internship application has been submitted successfully!"


class VoiceOfChangeListView(LoginRequiredMixin, ListView):
    template_name = "applications/voice_of_change_list.html"
    context_object_name = "voice_messages"

    def get_queryset(self):
        return VoiceOfChange.objects.filter(submitted_by=self.request.user).recent()


class PublishedVoiceOfChangeListView(ListView):
    """Approved messages shown on the public site."""

    template_name = "applications/voice_of_change_public.html"
    context_object_name = "voice_messages"
    paginate_by = 12

    def get_queryset(self):
        return VoiceOfChange.objects.published().select_related("submitted_by").order_by("-published_at")


class VoiceOfChangeCreateView(LoginRequiredMixin, ServiceErrorMixin, View):
    template_name = "applications/voice_of_change_form.html"

    def get(self, request):
        return render(request, self.template_name, {"form": VoiceOfChangeForm()})

    def post(self, request):
        try:
            SubmissionService.submit_voice_of_change(request.user, request.POST)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return render(request, self.template_name, {"form": VoiceOfChangeForm(request.POST)})

        messages.success(request, "Your message has been submitted for review.")
        return redirect("applications:voice_of_changes")


class VoiceOfChangeDetailView(LoginRequiredMixin, DetailView):
    template_name = "applications/voice_of_change_detail.html"
    context_object_name = "voice_message"

    def get_queryset(self):
        return VoiceOfChange.objects.filter(submitted_by=self.request.user)


class VoiceOfChangeUpdateView(LoginRequiredMixin, ServiceErrorMixin, View):
    template_name = "applications/voice_of_change_form.html"

    def get(self, request, pk):
        message = get_object_or_404(VoiceOfChange, pk=pk, submitted_by=request.user)
        if not message.is_editable:
            messages.error(request, "You can only edit pending or rejected messages.")
            return redirect("applications:voice_of_change_detail", pk=pk)
        form = VoiceOfChangeForm(instance=message)
        return render(request, self.template_name, {"form": form, "voice_message": message})

    def post(self, request, pk):
        try:
            SubmissionService.update_voice_of_change(request.user, pk, request.POST)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("applications:voice_of_change_detail", pk=pk)

        messages.success(request, "Your message has been updated and resubmitted for review.")
        return redirect("applications:voice_of_changes")


class VoiceOfChangeDeleteView(LoginRequiredMixin, ServiceErrorMixin, View):
    def post(self, request, pk):
        try:
            SubmissionService.delete_voice_of_change(request.user, pk)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("applications:voice_of_changes")

        messages.success(request, "Message deleted successfully.")
        return redirect("applications:voice_of_changes")
