"""Context processors for core app."""

from apps.core.models import SystemSetting


def branding(request):
    """Expose brand name, logo, support email and footer to every template."""
    return SystemSetting.branding()
