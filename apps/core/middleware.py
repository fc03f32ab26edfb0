"""Request context for the audit trail.

Services such as the review engine and the member registry write audit
entries without receiving the request. RequestContextMiddleware keeps the
request on a thread-local for the duration of the view so AuditService can
recover the acting user, client address and user agent.
"""

import threading

_local = threading.local()


def get_current_request():
    return getattr(_local, "request", None)


def get_current_user():
    """The authenticated user of the current request, or None outside one."""
    request = get_current_request()
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user
    return None


def get_client_ip(request=None):
    """Client address, preferring the first X-Forwarded-For hop."""
    request = request or get_current_request()
    if request is None:
        return None
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def get_audit_context(request=None) -> dict:
    """IP address and user agent recorded with each audit entry."""
    request = request or get_current_request()
    if request is None:
        return {"ip_address": None, "user_agent": ""}
    return {
        "ip_address": get_client_ip(request),
        "user_agent": request.META.get("HTTP_USER_AGENT", "")[:255],
    }


class RequestContextMiddleware:
    """Expose the current request to services for one request cycle."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        _local.request = request
        try:
            return self.get_response(request)
        finally:
            del _local.request
