"""Views for the admin dashboard app."""

import json

from django.contrib import messages
from django.db.models import Q
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views import View
from django.views.generic import DetailView, ListView, TemplateView

from apps.accounts.models import User
from apps.applications.forms import ReviewDecisionForm
from apps.applications.mixins import HANDLED_ERRORS, ServiceErrorMixin
from apps.applications.models import (
    InternshipApplication,
    UserApplication,
    VoiceOfChange,
    VolunteerApplication,
)
from apps.applications.services import (
    InternshipReviewService,
    UserApplicationReviewService,
    VoiceOfChangeReviewService,
    VolunteerReviewService,
)
from apps.core.models import AuditLog, SystemSetting
from apps.members.forms import MemberForm
from apps.members.models import Member
from apps.members.services import MemberService

from .mixins import AdminRequiredMixin, SystemAdminRequiredMixin

# Reviewable application kinds, addressed by the <kind> URL segment
REVIEW_KINDS = {
    "user": (UserApplication, UserApplicationReviewService, 15),
    "volunteer": (VolunteerApplication, VolunteerReviewService, 20),
    "internship": (InternshipApplication, InternshipReviewService, 20),
}


def collect_stats() -> dict:
    """Counts shown on the dashboard and returned by the stats endpoint."""
    return {
        "users": {
            "total": User.objects.count(),
            "guests": User.objects.filter(user_type=User.UserType.GUEST).count(),
            "numbered": User.objects.filter(user_type__in=User.NUMBERED_TYPES).count(),
        },
        "user_applications": UserApplication.objects.status_counts(),
        "volunteer_applications": VolunteerApplication.objects.status_counts(),
        "internship_applications": InternshipApplication.objects.status_counts(),
        "voice_of_changes": {
            "total": VoiceOfChange.objects.count(),
            "pending": VoiceOfChange.objects.pending().count(),
            "approved": VoiceOfChange.objects.approved().count(),
            "rejected": VoiceOfChange.objects.rejected().count(),
        },
        "members": {
            "total": Member.objects.count(),
            "active": Member.objects.active().count(),
        },
    }


class AdminDashboardView(AdminRequiredMixin, TemplateView):
    """Main admin dashboard with review queue statistics."""

    template_name = "admin_dashboard/index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["stats"] = collect_stats()
        context["pending_user_applications"] = (
            UserApplication.objects.pending().select_related("submitted_by").recent()[:5]
        )
        context["recent_decisions"] = AuditLog.objects.decisions().select_related("actor")[:10]
        return context


class DashboardStatsAPIView(AdminRequiredMixin, View):
    """JSON endpoint for dashboard widgets."""

    def get(self, request, *args, **kwargs):
        return JsonResponse(collect_stats())


class ReviewKindMixin:
    """Resolve the application model and review service from the URL kind."""

    def dispatch(self, request, *args, **kwargs):
        try:
            self.model, self.service_class, self.paginate_by = REVIEW_KINDS[kwargs["kind"]]
        except KeyError:
            raise Http404("Unknown application type.")
        self.kind = kwargs["kind"]
        return super().dispatch(request, *args, **kwargs)

    def get_service(self):
        return self.service_class()

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["kind"] = self.kind
        context["kind_label"] = self.model.kind_label
        return context


class ApplicationListView(AdminRequiredMixin, ReviewKindMixin, ListView):
    """Review queue for one application kind, filterable by status and type."""

    template_name = "admin_dashboard/applications.html"
    context_object_name = "applications"

    def get_queryset(self):
        queryset = self.model.objects.select_related("submitted_by", "reviewed_by").recent()

        status_filter = self.request.GET.get("status", "").strip()
        if status_filter in self.model.Status.values:
            queryset = queryset.filter(status=status_filter)

        search_query = self.request.GET.get("q", "").strip()
        if self.model is UserApplication:
            type_filter = self.request.GET.get("type", "").strip()
            if type_filter:
                queryset = queryset.filter(requested_user_type=type_filter)
            if search_query:
                queryset = queryset.filter(
                    Q(submitted_by__email__icontains=search_query)
                    | Q(submitted_by__first_name__icontains=search_query)
                    | Q(submitted_by__last_name__icontains=search_query)
                )
        elif search_query:
            queryset = queryset.filter(
                Q(name__icontains=search_query) | Q(email__icontains=search_query)
            )

        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["stats"] = self.model.objects.status_counts()
        context["status_choices"] = self.model.Status.choices
        context["status_filter"] = self.request.GET.get("status", "")
        context["type_filter"] = self.request.GET.get("type", "")
        context["search_query"] = self.request.GET.get("q", "")
        return context


class ApplicationDetailView(AdminRequiredMixin, ReviewKindMixin, DetailView):
    template_name = "admin_dashboard/application_detail.html"
    context_object_name = "application"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["decision_form"] = ReviewDecisionForm()
        context["history"] = AuditLog.objects.for_instance(self.object)
        return context


class ApplicationDecisionView(AdminRequiredMixin, ReviewKindMixin, ServiceErrorMixin, View):
    """Approve or reject a pending application."""

    decision = None

    def post(self, request, kind, pk):
        notes = request.POST.get("admin_notes", "")
        service = self.get_service()
        try:
            if self.decision == "approve":
                application = service.approve(pk, request.user, notes)
            else:
                application = service.reject(pk, request.user, notes)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("admin_dashboard:application_detail", kind=kind, pk=pk)

        messages.success(request, f"The {application.kind_label} has been {application.status.lower()}.")
        return redirect("admin_dashboard:applications", kind=kind)


class ApplicationDeleteView(AdminRequiredMixin, ReviewKindMixin, ServiceErrorMixin, View):
    def post(self, request, kind, pk):
        try:
            self.get_service().delete(pk, request.user)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("admin_dashboard:applications", kind=kind)

        messages.success(request, f"The {self.model.kind_label} has been deleted.")
        return redirect("admin_dashboard:applications", kind=kind)


class VoiceOfChangeAdminListView(AdminRequiredMixin, ListView):
    template_name = "admin_dashboard/voice_of_changes.html"
    context_object_name = "voice_messages"
    paginate_by = 20

    def get_queryset(self):
        queryset = VoiceOfChange.objects.select_related("submitted_by").recent()
        status_filter = self.request.GET.get("status", "").strip()
        if status_filter in VoiceOfChange.Status.values:
            queryset = queryset.filter(status=status_filter)
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["status_choices"] = VoiceOfChange.Status.choices
        context["status_filter"] = self.request.GET.get("status", "")
        return context


class VoiceOfChangeAdminDetailView(AdminRequiredMixin, DetailView):
    template_name = "admin_dashboard/voice_of_change_detail.html"
    model = VoiceOfChange
    context_object_name = "voice_message"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["decision_form"] = ReviewDecisionForm()
        context["history"] = AuditLog.objects.for_instance(self.object)
        return context


class VoiceOfChangeDecisionView(AdminRequiredMixin, ServiceErrorMixin, View):
    """Approve, reject or unpublish a message."""

    decision = None

    def post(self, request, pk):
        service = VoiceOfChangeReviewService()
        notes = request.POST.get("admin_notes", "")
        try:
            if self.decision == "approve":
                service.approve(pk, request.user, notes)
            elif self.decision == "reject":
                service.reject(pk, request.user, notes)
            else:
                service.unpublish(pk, request.user)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("admin_dashboard:voice_of_change_detail", pk=pk)

        past_tense = {"approve": "approved and published", "reject": "rejected"}
        messages.success(request, f"Message {past_tense.get(self.decision, 'unpublished')}.")
        return redirect("admin_dashboard:voice_of_changes")


class VoiceOfChangeAdminDeleteView(AdminRequiredMixin, ServiceErrorMixin, View):
    def post(self, request, pk):
        try:
            VoiceOfChangeReviewService().delete(pk, request.user)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return redirect("admin_dashboard:voice_of_changes")

        messages.success(request, "Message deleted.")
        return redirect("admin_dashboard:voice_of_changes")


class MemberListView(AdminRequiredMixin, ListView):
    """Member registry with search and status filter."""

    template_name = "admin_dashboard/members.html"
    context_object_name = "members"
    paginate_by = 25

    def get_queryset(self):
        queryset = Member.objects.recent()
        search_query = self.request.GET.get("q", "").strip()
        if search_query:
            queryset = queryset.filter(
                Q(name__icontains=search_query)
                | Q(email__icontains=search_query)
                | Q(membership_id__icontains=search_query)
            )

        status_filter = self.request.GET.get("status", "")
        if status_filter == "active":
            queryset = queryset.filter(is_active=True)
        elif status_filter == "inactive":
            queryset = queryset.filter(is_active=False)
        elif status_filter == "self_registered":
            queryset = queryset.filter(is_self_registered=True)

        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["search_query"] = self.request.GET.get("q", "")
        context["status_filter"] = self.request.GET.get("status", "")
        return context


class MemberDetailView(AdminRequiredMixin, DetailView):
    template_name = "admin_dashboard/member_detail.html"
    model = Member
    context_object_name = "member"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["history"] = AuditLog.objects.for_instance(self.object)
        return context


class MemberCreateView(AdminRequiredMixin, ServiceErrorMixin, View):
    template_name = "admin_dashboard/member_form.html"

    def get(self, request):
        form = MemberForm(initial={"is_active": True, "show_phone": True, "show_email": True})
        return render(request, self.template_name, {"form": form})

    def post(self, request):
        try:
            member = MemberService.create(request.POST, photo=request.FILES.get("photo"), actor=request.user)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return render(request, self.template_name, {"form": MemberForm(request.POST)})

        messages.success(request, f"Member {member.membership_id} created successfully.")
        return redirect("admin_dashboard:members")


class MemberUpdateView(AdminRequiredMixin, ServiceErrorMixin, View):
    template_name = "admin_dashboard/member_form.html"

    def get(self, request, pk):
        member = get_object_or_404(Member, pk=pk)
        return render(request, self.template_name, {"form": MemberForm(instance=member), "member": member})

    def post(self, request, pk):
        member = get_object_or_404(Member, pk=pk)
        try:
            MemberService.update(member, request.POST, photo=request.FILES.get("photo"), actor=request.user)
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            form = MemberForm(request.POST, instance=Member.objects.get(pk=pk))
            return render(request, self.template_name, {"form": form, "member": member})

        messages.success(request, "Member updated successfully.")
        return redirect("admin_dashboard:members")


class MemberActionView(AdminRequiredMixin, View):
    """Delete, activate or deactivate a registry entry."""

    def post(self, request, pk):
        member = get_object_or_404(Member, pk=pk)
        action = request.POST.get("action")

        if action == "activate":
            MemberService.activate(member, actor=request.user)
            messages.success(request, "Member activated successfully.")
        elif action == "deactivate":
            MemberService.deactivate(member, actor=request.user)
            messages.success(request, "Member deactivated successfully.")
        elif action == "delete":
            MemberService.delete(member, actor=request.user)
            messages.success(request, "Member deleted successfully.")
        else:
            messages.error(request, "Unknown action.")

        return redirect("admin_dashboard:members")


class AuditLogView(AdminRequiredMixin, ListView):
    """Audit log viewer with filters."""

    template_name = "admin_dashboard/audit_log.html"
    model = AuditLog
    context_object_name = "audit_logs"
    paginate_by = 50

    def get_queryset(self):
        """Filter audit logs based on query parameters."""
        queryset = AuditLog.objects.select_related("actor")

        action = self.request.GET.get("action", "").strip()
        if action:
            queryset = queryset.filter(action=action)

        resource_type = self.request.GET.get("resource_type", "").strip()
        if resource_type:
            queryset = queryset.filter(resource_type=resource_type)

        actor_email = self.request.GET.get("actor_email", "").strip()
        if actor_email:
            queryset = queryset.filter(actor_email__icontains=actor_email)

        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["action_filter"] = self.request.GET.get("action", "")
        context["resource_type_filter"] = self.request.GET.get("resource_type", "")
        context["actor_email_filter"] = self.request.GET.get("actor_email", "")

        # Distinct values for filter dropdowns
        context["available_actions"] = (
            AuditLog.objects.values_list("action", flat=True).distinct().order_by("action")
        )
        context["available_resource_types"] = (
            AuditLog.objects.values_list("resource_type", flat=True)
            .distinct()
            .order_by("resource_type")
        )
        return context


class SystemSettingsView(SystemAdminRequiredMixin, TemplateView):
    """Branding and contact settings, System Admin only."""

    template_name = "admin_dashboard/settings.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        settings_by_category = {}
        for setting in SystemSetting.objects.all():
            settings_by_category.setdefault(setting.get_category_display(), []).append(setting)

        context["settings_by_category"] = settings_by_category
        context["category_choices"] = SystemSetting.Category.choices
        return context

    def post(self, request, *args, **kwargs):
        key = request.POST.get("key", "").strip()
        if not key:
            messages.error(request, "Setting key is required.")
            return redirect("admin_dashboard:settings")

        category = request.POST.get("category", SystemSetting.Category.GENERAL)
        if category not in SystemSetting.Category.values:
            messages.error(request, f"Unknown setting category '{category}'.")
            return redirect("admin_dashboard:settings")

        raw_value = request.POST.get("value")
        try:
            value = json.loads(raw_value)
        except (json.JSONDecodeError, TypeError):
            value = raw_value

        SystemSetting.set_value(
            key,
            value,
            user=request.user,
            description=request.POST.get("description", ""),
            category=category,
        )
        messages.success(request, f"Setting '{key}' saved.")
        return redirect("admin_dashboard:settings")
