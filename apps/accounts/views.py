"""Views for accounts app."""

import logging

from django.contrib.auth import login
from django.contrib.auth.views import LoginView, LogoutView
from django.urls import reverse_lazy
from django.views.generic import CreateView

from apps.core.services import AuditService

from .forms import CustomAuthenticationForm, CustomUserCreationForm

logger = logging.getLogger(__name__)


class RegisterView(CreateView):
    """Sign-up for a Guest account; Guests may then apply for membership."""

    form_class = CustomUserCreationForm
    template_name = "accounts/register.html"
    success_url = reverse_lazy("applications:create")

    def form_valid(self, form):
        response = super().form_valid(form)
        login(self.request, self.object, backend="django.contrib.auth.backends.ModelBackend")
        AuditService.log(
            action="registered",
            resource_type="User",
            resource_id=self.object.pk,
            actor=self.object,
        )
        logger.info(f"Registered guest account {self.object.email}")
        return response


class CustomLoginView(LoginView):
    form_class = CustomAuthenticationForm
    template_name = "accounts/login.html"
    redirect_authenticated_user = True

    def form_valid(self, form):
        response = super().form_valid(form)
        AuditService.log(
            action="logged_in",
            resource_type="User",
            resource_id=self.request.user.pk,
            actor=self.request.user,
        )
        return response


class CustomLogoutView(LogoutView):
    def post(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            AuditService.log(
                action="logged_out",
                resource_type="User",
                resource_id=request.user.pk,
                actor=request.user,
            )
        return super().post(request, *args, **kwargs)
