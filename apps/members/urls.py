"""URL configuration for members app."""

from django.urls import path

from . import views

app_name = "members"

urlpatterns = [
    path("", views.MemberDirectoryView.as_view(), name="directory"),
    path("signup/", views.MemberSignupView.as_view(), name="signup"),
]
