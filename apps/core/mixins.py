"""Reusable mixins for views."""

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse


class LoginRequiredMixin:
    """Send anonymous visitors to the login page with a notice."""

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            messages.warning(request, "Please log in to access this page.")
            return redirect(f"{reverse('accounts:login')}?next={request.path}")
        return super().dispatch(request, *args, **kwargs)
