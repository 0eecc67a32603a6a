"""Alert notification delivery (email, SMS).

Usage:
    from infrastructure.notifications import (
        AlertDispatcher,
        AlertMessage,
        Severity,
        EmailChannel,
    )

    # Feature-level: build the message
    message = AlertMessage(subject_id="P001", text="...", severity=Severity.EMERGENCY)

    # Infrastructure-level: deliver it
    dispatcher = AlertDispatcher(channel=email_channel)
    outcome = dispatcher.dispatch(message, ["dr.house@example.com"])
"""

# Models
from infrastructure.notifications.models import (
    AlertMessage,
    DeliveryError,
    DeliveryErrorKind,
    DispatchOutcome,
    Severity,
)

# Errors
from infrastructure.notifications.errors import (
    AlertingError,
    InvalidAddress,
    MisconfiguredDispatcher,
)

# Dispatcher and service
from infrastructure.notifications.dispatcher import AlertDispatcher
from infrastructure.notifications.service import NotificationService

# Channel interface and implementations
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.email import EmailChannel
from infrastructure.notifications.channels.sms import SMSChannel

__all__ = [
    # Models
    "AlertMessage",
    "DeliveryError",
    "DeliveryErrorKind",
    "DispatchOutcome",
    "Severity",
    # Errors
    "AlertingError",
    "InvalidAddress",
    "MisconfiguredDispatcher",
    # Dispatch
    "AlertDispatcher",
    "NotificationService",
    # Channels
    "NotificationChannel",
    "EmailChannel",
    "SMSChannel",
]
