"""Views for notifications app."""

from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views import View
from django.views.generic import ListView

from apps.core.mixins import LoginRequiredMixin
from apps.notifications.models import Notification
from apps.notifications.services import NotificationService


class NotificationListView(LoginRequiredMixin, ListView):
    """The current user's notifications."""

    template_name = "notifications/list.html"
    context_object_name = "notifications"
    paginate_by = 25

    def get_queryset(self):
        return Notification.objects.filter(user=self.request.user)


class MarkNotificationReadView(LoginRequiredMixin, View):
    """Mark one notification read and follow its link."""

    def post(self, request, pk):
        notification = get_object_or_404(Notification, pk=pk, user=request.user)
        notification.mark_read()
        return redirect(notification.link or "notifications:list")


class MarkAllReadView(LoginRequiredMixin, View):
    def post(self, request):
        updated = NotificationService.mark_all_read(request.user)
        return JsonResponse({"updated": updated})


class UnreadCountView(LoginRequiredMixin, View):
    def get(self, request):
        return JsonResponse({"unread": NotificationService.get_unread_count(request.user)})
