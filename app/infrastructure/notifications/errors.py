"""Errors raised by the alerting pipeline before any message is sent.

Per-recipient delivery failures are not exceptions; they are reported as
DeliveryError values in a DispatchOutcome.
"""

from typing import Optional


class AlertingError(Exception):
    """Base class for configuration and input errors in the alerting pipeline."""


class MisconfiguredDispatcher(AlertingError):
    """Raised when a dispatch cannot start: no channel bound or no recipients."""


class InvalidAddress(AlertingError):
    """Raised when a contact address is missing or unusable for a channel.

    Attributes:
        address: the offending address, if any
        channel: channel the address was meant for
    """

    def __init__(self, message: str, address: Optional[str] = None, channel: Optional[str] = None):
        super().__init__(message)
        self.address = address
        self.channel = channel
