"""Public member registry pages."""

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views import View
from django.views.generic import ListView

from apps.applications.mixins import HANDLED_ERRORS, ServiceErrorMixin
from apps.members.forms import MemberSignupForm
from apps.members.models import Member
from apps.members.services import MemberService


class MemberDirectoryView(ListView):
    """Active members with only the contact details they chose to show."""

    template_name = "members/directory.html"
    context_object_name = "members"
    paginate_by = 24

    def get_queryset(self):
        return Member.objects.active().order_by("name")


class MemberSignupView(ServiceErrorMixin, View):
    template_name = "members/signup.html"

    def get(self, request):
        return render(request, self.template_name, {"form": MemberSignupForm()})

    def post(self, request):
        try:
            MemberService.signup(request.POST, photo=request.FILES.get("photo"))
        except HANDLED_ERRORS as exc:
            self.handle_service_error(exc)
            return render(request, self.template_name, {"form": MemberSignupForm(request.POST)})

        messages.success(request, "Signup successful. Your membership is pending activation by an administrator.")
        return redirect("members:directory")
