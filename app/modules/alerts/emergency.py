"""Emergency alerts: threshold-driven vital alerts and the panic button.

Lifecycle of an alert:

    IDLE ──check──▶ EVALUATED ──abnormal──▶ DISPATCHED
                              └─normal────▶ SUPPRESSED

A panic button skips evaluation and goes straight to DISPATCHED. Once an
alert is DISPATCHED or SUPPRESSED, triggering it again returns the first
result and sends nothing.
"""

from abc import ABC
from enum import Enum
from typing import Callable, List, Optional, Sequence

from infrastructure.logging import bind_alert_context, get_module_logger
from infrastructure.notifications import (
    AlertDispatcher,
    AlertMessage,
    DispatchOutcome,
    Severity,
)
from modules.alerts.errors import MissingContext
from modules.care.models import UserRecord
from modules.vitals import (
    NormalRangeTable,
    ThresholdEvaluator,
    Verdict,
    VitalReading,
)

logger = get_module_logger()

ClinicianSession = Callable[[AlertMessage], None]


class AlertState(Enum):
    IDLE = "idle"
    EVALUATED = "evaluated"
    DISPATCHED = "dispatched"
    SUPPRESSED = "suppressed"


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_vital_alert(patient_id: str, reading: VitalReading, verdict: Verdict) -> str:
    """Alert text for an abnormal reading.

    All four values are listed; only the violating metrics are named in the
    trailing note.
    """
    return (
        f"Alert! Patient {patient_id}'s vitals are abnormal: "
        f"HR={_fmt(reading.heart_rate)}, BP={_fmt(reading.blood_pressure)}, "
        f"Temp={_fmt(reading.body_temperature)}, O2={_fmt(reading.oxygen_level)} "
        f"(out of range: {', '.join(verdict.labels)})"
    )


class EmergencyAlert(ABC):
    """Shared state and dispatch for emergency alerts.

    Attributes:
        patient: Patient the alert concerns.
        dispatcher: AlertDispatcher bound to the delivery channel.
        recipients: Addresses to notify; owned by the caller.
        state: Current AlertState.
        message: AlertMessage sent, once dispatched.
        outcome: DispatchOutcome, once dispatched.
    """

    kind = "emergency"

    def __init__(
        self,
        patient: Optional[UserRecord],
        dispatcher: AlertDispatcher,
        recipients: Sequence[str],
    ):
        self.patient = patient
        self.dispatcher = dispatcher
        self.recipients: List[str] = list(recipients)
        self.state = AlertState.IDLE
        self.message: Optional[AlertMessage] = None
        self.outcome: Optional[DispatchOutcome] = None

    @property
    def has_fired(self) -> bool:
        """True once the alert has been dispatched or suppressed."""
        return self.state in (AlertState.DISPATCHED, AlertState.SUPPRESSED)

    def _dispatch(self, message: AlertMessage) -> DispatchOutcome:
        outcome = self.dispatcher.dispatch(message, self.recipients)
        self.message = message
        self.outcome = outcome
        self.state = AlertState.DISPATCHED
        return outcome


class VitalAlert(EmergencyAlert):
    """Alert raised when a reading falls outside its normal range.

    Example:
        alert = VitalAlert(patient, reading, dispatcher, ["dr.house@example.com"])
        outcome = alert.check_and_trigger()
        if outcome is None:
            # reading was normal, nothing sent
    """

    kind = "vital"

    def __init__(
        self,
        patient: Optional[UserRecord],
        reading: Optional[VitalReading],
        dispatcher: AlertDispatcher,
        recipients: Sequence[str],
        evaluator: Optional[ThresholdEvaluator] = None,
    ):
        super().__init__(patient, dispatcher, recipients)
        self.reading = reading
        self.evaluator = evaluator or ThresholdEvaluator(NormalRangeTable.default())
        self.verdict: Optional[Verdict] = None

    def check_and_trigger(self) -> Optional[DispatchOutcome]:
        """Evaluate the reading and dispatch the alert if it is abnormal.

        Returns:
            DispatchOutcome if the alert was sent, None if the reading was
            normal.

        Raises:
            MissingContext: Patient or reading is absent, or the reading
                belongs to another patient.
            InvalidReading: A metric is missing or not finite.
            MisconfiguredDispatcher: No channel bound or no recipients.
        """
        if self.has_fired:
            logger.info(
                "alert_already_evaluated",
                state=self.state.value,
                patient_id=self.patient.user_id if self.patient else None,
            )
            return self.outcome

        if self.patient is None or self.reading is None:
            raise MissingContext("Vital or patient information missing.")
        if self.reading.subject_id != self.patient.user_id:
            raise MissingContext(
                f"Reading for {self.reading.subject_id} does not belong to "
                f"patient {self.patient.user_id}"
            )

        with bind_alert_context(patient_id=self.patient.user_id, alert_kind=self.kind):
            self.verdict = self.evaluator.evaluate(self.reading)
            self.state = AlertState.EVALUATED

            if self.verdict.is_normal:
                self.state = AlertState.SUPPRESSED
                logger.debug("vital_alert_suppressed")
                return None

            logger.info("vital_alert_triggered", violations=self.verdict.labels)
            message = AlertMessage(
                subject_id=self.patient.user_id,
                text=format_vital_alert(
                    self.patient.user_id, self.reading, self.verdict
                ),
                severity=Severity.EMERGENCY,
            )
            return self._dispatch(message)


class PanicButton(EmergencyAlert):
    """Patient-initiated emergency alert to the treating clinician.

    The alert is sent over the dispatcher's channel and, when a clinician
    session callback is supplied, also delivered in-process to that session.
    """

    kind = "panic"

    def __init__(
        self,
        patient: Optional[UserRecord],
        clinician: Optional[UserRecord],
        dispatcher: AlertDispatcher,
        recipients: Sequence[str],
        clinician_session: Optional[ClinicianSession] = None,
    ):
        super().__init__(patient, dispatcher, recipients)
        self.clinician = clinician
        self.clinician_session = clinician_session

    def trigger(self) -> DispatchOutcome:
        """Send the emergency alert.

        Raises:
            MissingContext: Patient or clinician is absent.
            MisconfiguredDispatcher: No channel bound or no recipients.
        """
        if self.has_fired:
            logger.info("panic_alert_already_sent")
            return self.outcome

        if self.patient is None or self.clinician is None:
            raise MissingContext("Patient or doctor information missing.")

        with bind_alert_context(patient_id=self.patient.user_id, alert_kind=self.kind):
            message = AlertMessage(
                subject_id=self.patient.user_id,
                text=f"Emergency! Patient {self.patient.user_id} needs immediate attention.",
                severity=Severity.EMERGENCY,
            )
            outcome = self._dispatch(message)

            if self.clinician_session is not None:
                self.clinician_session(message)
                logger.info("clinician_session_notified", clinician_id=self.clinician.user_id)
            else:
                logger.info("clinician_session_unavailable", clinician_id=self.clinician.user_id)

            return outcome
