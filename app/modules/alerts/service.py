"""Alerting service: the entry point the presentation layer calls.

Wires the care directory, the notification service and the normal range
table together so callers deal in patient and doctor ids only.
"""

from typing import TYPE_CHECKING, Iterable, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    DispatchOutcome,
    InvalidAddress,
    MisconfiguredDispatcher,
    NotificationService,
)
from infrastructure.operations import OperationResult
from modules.alerts.digest import DigestReport, notify_abnormal
from modules.alerts.emergency import ClinicianSession, PanicButton, VitalAlert
from modules.alerts.errors import MissingContext
from modules.alerts.reminders import ReminderEvent, ReminderScheduler
from modules.care import CareDirectory, UserRecord
from modules.vitals import NormalRangeTable, ThresholdEvaluator, VitalReading

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class AlertingService:
    """Class-based alerting facade.

    Usage:
        service = AlertingService.from_settings(settings, directory)
        alert = service.check_reading("P001", reading)
        if alert.outcome and alert.outcome.failed:
            ...

        # Tests inject fakes
        service = AlertingService(directory, NotificationService(settings, channels={...}))
    """

    def __init__(
        self,
        directory: CareDirectory,
        notifications: NotificationService,
        ranges: Optional[NormalRangeTable] = None,
        alert_channel: str = "email",
    ):
        self.directory = directory
        self.notifications = notifications
        self.evaluator = ThresholdEvaluator(ranges or NormalRangeTable.default())
        self.alert_channel = alert_channel

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        directory: CareDirectory,
        notifications: Optional[NotificationService] = None,
    ) -> "AlertingService":
        return cls(
            directory=directory,
            notifications=notifications or NotificationService(settings),
            ranges=NormalRangeTable.from_settings(settings.vitals),
            alert_channel=settings.vitals.alert_channel,
        )

    def _patient(self, patient_id: str) -> UserRecord:
        user = self.directory.get_user(patient_id)
        if user is None or not user.is_patient:
            raise MissingContext(f"Patient {patient_id} not found")
        return user

    def _doctor(self, patient: UserRecord, doctor_id: Optional[str] = None) -> UserRecord:
        doctor_id = doctor_id or patient.profile.treating_doctor_id
        if not doctor_id:
            raise MissingContext(f"Patient {patient.user_id} has no treating doctor")
        user = self.directory.get_user(doctor_id)
        if user is None or not user.is_doctor:
            raise MissingContext(f"Doctor {doctor_id} not found")
        return user

    @staticmethod
    def _contact(user: UserRecord, channel_name: str) -> str:
        try:
            return user.contact_for(channel_name)
        except InvalidAddress as e:
            raise MissingContext(str(e)) from e

    def _recipients(self, doctor: UserRecord) -> List[str]:
        return [self._contact(doctor, self.alert_channel)]

    def check_reading(
        self, patient_id: str, reading: VitalReading, doctor_id: Optional[str] = None
    ) -> VitalAlert:
        """Evaluate one reading and alert the doctor if it is abnormal.

        Returns:
            The VitalAlert, carrying state, verdict and outcome.
        """
        patient = self._patient(patient_id)
        doctor = self._doctor(patient, doctor_id)
        alert = VitalAlert(
            patient=patient,
            reading=reading,
            dispatcher=self.notifications.dispatcher_for(self.alert_channel),
            recipients=self._recipients(doctor),
            evaluator=self.evaluator,
        )
        alert.check_and_trigger()
        return alert

    def check_latest_reading(
        self, patient_id: str, doctor_id: Optional[str] = None
    ) -> VitalAlert:
        """Run check_reading on the patient's most recent stored reading."""
        history = self.directory.vital_history(patient_id)
        if not history:
            raise MissingContext(f"No vital signs recorded for patient {patient_id}")
        return self.check_reading(patient_id, history[-1], doctor_id)

    def press_panic_button(
        self,
        patient_id: str,
        doctor_id: Optional[str] = None,
        clinician_session: Optional[ClinicianSession] = None,
    ) -> DispatchOutcome:
        patient = self._patient(patient_id)
        doctor = self._doctor(patient, doctor_id)
        button = PanicButton(
            patient=patient,
            clinician=doctor,
            dispatcher=self.notifications.dispatcher_for(self.alert_channel),
            recipients=self._recipients(doctor),
            clinician_session=clinician_session,
        )
        return button.trigger()

    def review_upload(
        self,
        patient_id: str,
        readings: Iterable[VitalReading],
        doctor_id: Optional[str] = None,
    ) -> DigestReport:
        """Triage uploaded readings and send the doctor a digest of abnormal ones.

        The doctor is only resolved when there is something to send.
        """
        patient = self._patient(patient_id)
        triaged = self.evaluator.triage(readings)
        if not triaged.has_abnormal:
            return DigestReport(normal=list(triaged.normal))

        doctor = self._doctor(patient, doctor_id)
        return notify_abnormal(
            patient_id,
            triaged,
            self.notifications.dispatcher_for(self.alert_channel),
            self._recipients(doctor),
        )

    def send_direct_message(
        self, patient_id: str, text: str, doctor_id: Optional[str] = None
    ) -> OperationResult:
        """Text the doctor on the patient's behalf."""
        if not text or not text.strip():
            raise ValueError("Message text must not be empty")
        patient = self._patient(patient_id)
        doctor = self._doctor(patient, doctor_id)
        result = self.notifications.send("sms", text, self._contact(doctor, "sms"))
        logger.info(
            "direct_message_sent" if result.is_success else "direct_message_failed",
            patient_id=patient_id,
            doctor_id=doctor.user_id,
        )
        return result

    def send_reminder(
        self, event: ReminderEvent, channel_name: str = "email"
    ) -> OperationResult:
        """Remind the patient named in event over channel_name."""
        channel = self.notifications.get_channel(channel_name)
        if channel is None:
            raise MisconfiguredDispatcher(
                f"Unknown notification channel '{channel_name}'"
            )
        patient = self._patient(event.patient_id)
        recipient = self._contact(patient, channel_name)
        return ReminderScheduler(channel).remind(event, recipient)
