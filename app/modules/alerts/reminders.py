"""Appointment and medication reminders.

Reminders are a single best-effort send: a failure is reported back to the
caller and never retried or escalated.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from infrastructure.logging import bind_alert_context, get_module_logger
from infrastructure.notifications import MisconfiguredDispatcher, NotificationChannel
from infrastructure.operations import OperationResult

logger = get_module_logger()

REMINDER_SUBJECT = "RPMS Reminder"


@dataclass(frozen=True)
class AppointmentCreated:
    appointment_id: str
    patient_id: str
    doctor_name: str
    scheduled_for: datetime

    def reminder_text(self) -> str:
        when = self.scheduled_for.isoformat(timespec="minutes")
        return f"Reminder: Appointment with Dr. {self.doctor_name} on {when}"


@dataclass(frozen=True)
class PrescriptionIssued:
    prescription_id: str
    patient_id: str
    medication: str
    dosage: str
    schedule: str

    def reminder_text(self) -> str:
        return (
            f"Reminder: Take {self.medication} ({self.dosage}) "
            f"as per schedule: {self.schedule}"
        )


ReminderEvent = Union[AppointmentCreated, PrescriptionIssued]


def render_reminder(event: ReminderEvent) -> str:
    """Reminder text for an event.

    Raises:
        TypeError: The event is not a supported reminder event.
    """
    if not isinstance(event, (AppointmentCreated, PrescriptionIssued)):
        raise TypeError(f"Unsupported reminder event: {type(event).__name__}")
    return event.reminder_text()


class ReminderScheduler:
    """Sends reminders for scheduling events over one channel.

    Example:
        scheduler = ReminderScheduler(channel=email_channel)
        result = scheduler.remind(appointment, "patient@example.com")
        if not result.is_success:
            ...
    """

    def __init__(self, channel: Optional[NotificationChannel]):
        self.channel = channel

    def remind(self, event: ReminderEvent, recipient: str) -> OperationResult:
        """Send the reminder for event to recipient.

        Returns:
            OperationResult from the channel.

        Raises:
            TypeError: Unsupported event.
            MisconfiguredDispatcher: No channel bound.
        """
        text = render_reminder(event)
        if self.channel is None:
            raise MisconfiguredDispatcher("Reminder scheduler has no channel bound")

        with bind_alert_context(patient_id=event.patient_id, alert_kind="reminder"):
            result = self.channel.send(text, recipient, subject=REMINDER_SUBJECT)
            if result.is_success:
                logger.info("reminder_sent", event_type=type(event).__name__)
            else:
                logger.warning(
                    "reminder_failed",
                    event_type=type(event).__name__,
                    error=result.message,
                    error_code=result.error_code,
                )
            return result
