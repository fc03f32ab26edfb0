"""Custom template filters for core app."""

from django import template

register = template.Library()

STATUS_CLASSES = {
    "pending": "badge-warning",
    "approved": "badge-success",
    "rejected": "badge-danger",
    "active": "badge-success",
    "inactive": "badge-muted",
}


@register.filter(name="status_class")
def status_class(value):
    """
    Map a review or account status to a badge CSS class.

    Example: {{ application.status|status_class }} -> "badge-warning"
    """
    if not value:
        return "badge-muted"
    return STATUS_CLASSES.get(str(value).lower(), "badge-muted")
