"""Digest of abnormal readings from an uploaded batch."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from infrastructure.logging import bind_alert_context, get_module_logger
from infrastructure.notifications import (
    AlertDispatcher,
    AlertMessage,
    DispatchOutcome,
    Severity,
)
from modules.vitals import ThresholdEvaluator, TriageResult, Verdict, VitalReading

logger = get_module_logger()


@dataclass
class DigestReport:
    """Triage of an upload and the outcome of the digest, if one was sent."""

    normal: List[VitalReading] = field(default_factory=list)
    abnormal: List[Tuple[VitalReading, Verdict]] = field(default_factory=list)
    outcome: Optional[DispatchOutcome] = None

    @property
    def was_sent(self) -> bool:
        return self.outcome is not None


def format_digest(
    patient_id: str, abnormal: Sequence[Tuple[VitalReading, Verdict]]
) -> str:
    lines = [f"Abnormal vitals detected for patient {patient_id}:"]
    for reading, verdict in abnormal:
        lines.append(
            f"Date: {reading.observed_at.isoformat()}, "
            f"HR: {reading.heart_rate:.2f}, BP: {reading.blood_pressure:.2f}, "
            f"Temp: {reading.body_temperature:.2f}, O2: {reading.oxygen_level:.2f} "
            f"(out of range: {', '.join(verdict.labels)})"
        )
    return "\n".join(lines)


def notify_abnormal(
    patient_id: str,
    triaged: TriageResult,
    dispatcher: AlertDispatcher,
    recipients: Sequence[str],
) -> DigestReport:
    """Send one digest for the abnormal part of an already triaged batch.

    Nothing is sent when the batch has no abnormal reading.
    """
    report = DigestReport(normal=list(triaged.normal), abnormal=list(triaged.abnormal))
    if not triaged.has_abnormal:
        logger.debug("upload_all_normal", patient_id=patient_id, count=len(report.normal))
        return report

    with bind_alert_context(patient_id=patient_id, alert_kind="digest"):
        message = AlertMessage(
            subject_id=patient_id,
            text=format_digest(patient_id, triaged.abnormal),
            severity=Severity.INFO,
        )
        report.outcome = dispatcher.dispatch(message, recipients)
        logger.info(
            "abnormal_digest_sent",
            abnormal_count=len(report.abnormal),
            normal_count=len(report.normal),
        )
    return report


def send_abnormal_digest(
    patient_id: str,
    readings: Iterable[VitalReading],
    evaluator: ThresholdEvaluator,
    dispatcher: AlertDispatcher,
    recipients: Sequence[str],
) -> DigestReport:
    """Triage an uploaded batch and send a digest of the abnormal readings.

    Args:
        patient_id: Patient the readings belong to.
        readings: Uploaded readings, in upload order.
        evaluator: ThresholdEvaluator holding the range table.
        dispatcher: Dispatcher bound to the delivery channel.
        recipients: Clinician addresses to notify.

    Raises:
        InvalidReading: Any reading in the batch is invalid; nothing is sent.
        MisconfiguredDispatcher: Abnormal readings found but no channel or
            recipients configured.
    """
    triaged = evaluator.triage(readings)
    return notify_abnormal(patient_id, triaged, dispatcher, recipients)
