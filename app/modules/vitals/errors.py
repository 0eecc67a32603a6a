"""Errors for the vitals module."""

from infrastructure.notifications.errors import AlertingError


class InvalidReading(AlertingError, ValueError):
    """Raised when a vital reading has a missing or non-finite metric.

    Attributes:
        metric: name of the offending metric, if known
    """

    def __init__(self, message: str, metric: str | None = None):
        super().__init__(message)
        self.metric = metric
