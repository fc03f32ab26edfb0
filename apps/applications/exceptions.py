"""Errors raised by the submission and review services."""


class ReviewError(Exception):
    """Base exception for submission and review errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ApplicationValidationError(ReviewError):
    """Submitted fields failed validation.

    ``errors`` maps field names to lists of messages so callers can show
    them beside the offending inputs.
    """

    def __init__(self, errors: dict, message: str = "Please correct the errors below."):
        super().__init__(message)
        self.errors = {field: list(messages) for field, messages in errors.items()}


class ApplicationConflict(ReviewError):
    """The record is not in a state that allows the requested action."""


class ApplicationNotFound(ReviewError):
    """The referenced application, message or user does not exist."""


class PersistenceFailure(ReviewError):
    """The atomic write failed and was rolled back."""
