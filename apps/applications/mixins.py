"""View mixins translating service errors into responses."""

from django.contrib import messages
from django.http import Http404

from apps.applications.exceptions import (
    ApplicationConflict,
    ApplicationNotFound,
    ApplicationValidationError,
)

# PersistenceFailure is deliberately absent: it propagates as a server error.
HANDLED_ERRORS = (ApplicationValidationError, ApplicationConflict, ApplicationNotFound)


class ServiceErrorMixin:
    """Turn validation and conflict errors into flash messages, missing records into 404."""

    def handle_service_error(self, exc) -> None:
        if isinstance(exc, ApplicationNotFound):
            raise Http404(exc.message)

        if isinstance(exc, ApplicationValidationError):
            for field, errors in exc.errors.items():
                label = field.replace("_", " ").capitalize()
                for error in errors:
                    messages.error(self.request, f"{label}: {error}")
            return

        messages.error(self.request, exc.message)
