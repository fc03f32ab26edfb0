"""Core views."""

from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.views import View
from django.views.generic import TemplateView

from apps.applications.models import UserApplication, VoiceOfChange
from apps.core.mixins import LoginRequiredMixin
from apps.notifications.models import Notification
from apps.notifications.services import NotificationService


class HomeView(TemplateView):
    """Public landing page with the latest published messages."""

    template_name = "core/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["voice_messages"] = (
            VoiceOfChange.objects.published().select_related("submitted_by").order_by("-published_at")[:3]
        )
        return context


class UserDashboardView(LoginRequiredMixin, View):
    """User's personal dashboard: applications, messages and notifications."""

    def get(self, request):
        user = request.user
        if user.is_admin:
            return redirect("admin_dashboard:index")

        applications = UserApplication.objects.filter(submitted_by=user).recent()
        pending_application = applications.filter(status=UserApplication.Status.PENDING).first()

        voice_messages = VoiceOfChange.objects.filter(submitted_by=user).recent()[:5]

        notifications = Notification.objects.filter(user=user).order_by("-created_at")[:10]
        unread_count = NotificationService.get_unread_count(user)

        context = {
            "applications": applications[:5],
            "pending_application": pending_application,
            "can_apply": user.can_apply_for_membership and pending_application is None,
            "voice_messages": voice_messages,
            "notifications": notifications,
            "unread_count": unread_count,
        }

        return render(request, "dashboards/user_dashboard.html", context)


class ToggleDarkModeView(View):
    """Toggle dark mode preference."""

    def post(self, request):
        if request.user.is_authenticated:
            current = request.session.get("dark_mode", False)
            request.session["dark_mode"] = not current
            return JsonResponse({"dark_mode": not current})
        return JsonResponse({"error": "Not authenticated"}, status=401)
