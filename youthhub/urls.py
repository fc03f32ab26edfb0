"""URL configuration for Youth Hub project."""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("apps.core.urls")),
    path("accounts/", include("apps.accounts.urls")),
    path("", include("apps.applications.urls")),
    path("members/", include("apps.members.urls")),
    path("notifications/", include("apps.notifications.urls")),
    path("admin-dashboard/", include("apps.admin_dashboard.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
