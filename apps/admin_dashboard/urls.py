"""URL configuration for admin dashboard app."""

from django.urls import path

from .views import (
    AdminDashboardView,
    ApplicationDecisionView,
    ApplicationDeleteView,
    ApplicationDetailView,
    ApplicationListView,
    AuditLogView,
    DashboardStatsAPIView,
    MemberActionView,
    MemberCreateView,
    MemberDetailView,
    MemberListView,
    MemberUpdateView,
    SystemSettingsView,
    VoiceOfChangeAdminDeleteView,
    VoiceOfChangeAdminDetailView,
    VoiceOfChangeAdminListView,
    VoiceOfChangeDecisionView,
)

app_name = "admin_dashboard"

urlpatterns = [
    path("", AdminDashboardView.as_view(), name="index"),
    path("api/stats/", DashboardStatsAPIView.as_view(), name="stats_api"),
    # Application review; kind is user, volunteer or internship
    path("applications/<str:kind>/", ApplicationListView.as_view(), name="applications"),
    path("applications/<str:kind>/<int:pk>/", ApplicationDetailView.as_view(), name="application_detail"),
    path(
        "applications/<str:kind>/<int:pk>/approve/",
        ApplicationDecisionView.as_view(decision="approve"),
        name="application_approve",
    ),
    path(
        "applications/<str:kind>/<int:pk>/reject/",
        ApplicationDecisionView.as_view(decision="reject"),
        name="application_reject",
    ),
    path("applications/<str:kind>/<int:pk>/delete/", ApplicationDeleteView.as_view(), name="application_delete"),
    # Voice of change moderation
    path("voice-of-changes/", VoiceOfChangeAdminListView.as_view(), name="voice_of_changes"),
    path("voice-of-changes/<int:pk>/", VoiceOfChangeAdminDetailView.as_view(), name="voice_of_change_detail"),
    path(
        "voice-of-changes/<int:pk>/approve/",
        VoiceOfChangeDecisionView.as_view(decision="approve"),
        name="voice_of_change_approve",
    ),
    path(
        "voice-of-changes/<int:pk>/reject/",
        VoiceOfChangeDecisionView.as_view(decision="reject"),
        name="voice_of_change_reject",
    ),
    path(
        "voice-of-changes/<int:pk>/unpublish/",
        VoiceOfChangeDecisionView.as_view(decision="unpublish"),
        name="voice_of_change_unpublish",
    ),
    path("voice-of-changes/<int:pk>/delete/", VoiceOfChangeAdminDeleteView.as_view(), name="voice_of_change_delete"),
    # Member registry
    path("members/", MemberListView.as_view(), name="members"),
    path("members/new/", MemberCreateView.as_view(), name="member_create"),
    path("members/<int:pk>/", MemberDetailView.as_view(), name="member_detail"),
    path("members/<int:pk>/edit/", MemberUpdateView.as_view(), name="member_edit"),
    path("members/<int:pk>/action/", MemberActionView.as_view(), name="member_action"),
    # Audit and settings
    path("audit/", AuditLogView.as_view(), name="audit_log"),
    path("settings/", SystemSettingsView.as_view(), name="settings"),
]
