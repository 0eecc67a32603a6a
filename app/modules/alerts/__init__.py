"""Emergency alerts, reminders and upload digests."""

from modules.alerts.digest import (
    DigestReport,
    format_digest,
    notify_abnormal,
    send_abnormal_digest,
)
from modules.alerts.emergency import (
    AlertState,
    EmergencyAlert,
    PanicButton,
    VitalAlert,
    format_vital_alert,
)
from modules.alerts.errors import MissingContext
from modules.alerts.reminders import (
    AppointmentCreated,
    PrescriptionIssued,
    ReminderScheduler,
    render_reminder,
)
from modules.alerts.service import AlertingService

__all__ = [
    "DigestReport",
    "format_digest",
    "notify_abnormal",
    "send_abnormal_digest",
    "AlertState",
    "EmergencyAlert",
    "PanicButton",
    "VitalAlert",
    "format_vital_alert",
    "MissingContext",
    "AppointmentCreated",
    "PrescriptionIssued",
    "ReminderScheduler",
    "render_reminder",
    "AlertingService",
]
