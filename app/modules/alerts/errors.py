"""Errors for the alerts module."""

from infrastructure.notifications.errors import AlertingError


class MissingContext(AlertingError):
    """Raised when an alert lacks the patient, reading or clinician it needs."""
