"""URL configuration for applications app."""

from django.urls import path

from . import views

app_name = "applications"

urlpatterns = [
    # Membership (user type) applications
    path("applications/", views.UserApplicationListView.as_view(), name="index"),
    path("applications/apply/", views.UserApplicationCreateView.as_view(), name="create"),
    path("applications/<int:pk>/", views.UserApplicationDetailView.as_view(), name="detail"),
    path("applications/<int:pk>/cancel/", views.UserApplicationCancelView.as_view(), name="cancel"),
    # Public opportunity forms
    path("opportunities/volunteer/", views.VolunteerApplicationCreateView.as_view(), name="volunteer"),
    path("opportunities/internship/", views.InternshipApplicationCreateView.as_view(), name="internship"),
    # Voice of change
    path("voices/", views.PublishedVoiceOfChangeListView.as_view(), name="published_voices"),
    path("voice-of-changes/", views.VoiceOfChangeListView.as_view(), name="voice_of_changes"),
    path("voice-of-changes/new/", views.VoiceOfChangeCreateView.as_view(), name="voice_of_change_create"),
    path("voice-of-changes/<int:pk>/", views.VoiceOfChangeDetailView.as_view(), name="voice_of_change_detail"),
    path("voice-of-changes/<int:pk>/edit/", views.VoiceOfChangeUpdateView.as_view(), name="voice_of_change_edit"),
    path("voice-of-changes/<int:pk>/delete/", views.VoiceOfChangeDeleteView.as_view(), name="voice_of_change_delete"),
]
