"""Shared fixtures: users, readings, messages and a recording fake channel."""

from datetime import date
from typing import Dict, List, Optional, Set, Tuple
from unittest.mock import MagicMock

import pytest

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import (
    INVALID_ADDRESS,
    AlertMessage,
    Severity,
)
from infrastructure.operations import OperationResult
from modules.care.models import DoctorProfile, PatientProfile, UserRecord
from modules.vitals.models import VitalReading


class RecordingChannel(NotificationChannel):
    """In-memory channel that records every send.

    Attributes:
        calls: (message, recipient, subject) per send, in call order
        failures: recipient → OperationResult to return instead of success
        explode_for: recipients for which send raises RuntimeError
    """

    def __init__(self, name: str = "email"):
        self._name = name
        self.calls: List[Tuple[str, str, Optional[str]]] = []
        self.failures: Dict[str, OperationResult] = {}
        self.explode_for: Set[str] = set()

    @property
    def channel_name(self) -> str:
        return self._name

    @property
    def requires_credentials(self) -> bool:
        return False

    def validate_address(self, recipient: str) -> OperationResult:
        if not recipient:
            return OperationResult.permanent_error(
                "Address required", error_code=INVALID_ADDRESS
            )
        return OperationResult.success(data={"address": recipient})

    def send(self, message, recipient, subject=None) -> OperationResult:
        self.calls.append((message, recipient, subject))
        if recipient in self.explode_for:
            raise RuntimeError(f"boom for {recipient}")
        if recipient in self.failures:
            return self.failures[recipient]
        return OperationResult.success(data={"address": recipient})

    def health_check(self) -> OperationResult:
        return OperationResult.success()

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def recipients(self) -> List[str]:
        return [recipient for _, recipient, _ in self.calls]


@pytest.fixture
def recording_channel():
    """Email-named RecordingChannel."""
    return RecordingChannel("email")


@pytest.fixture
def sms_recording_channel():
    """SMS-named RecordingChannel."""
    return RecordingChannel("sms")


@pytest.fixture
def mock_settings():
    """Mock Settings instance for channel and transport tests.

    Returns:
        Mock settings with smtp, twilio and vitals sections
    """
    mock = MagicMock()
    mock.smtp.sender = "rpms@example.com"
    mock.smtp.SMTP_HOST = "smtp.example.com"
    mock.twilio.TWILIO_API_URL = "https://api.twilio.test/2010-04-01"
    mock.vitals.alert_channel = "email"
    return mock


@pytest.fixture
def reading_factory():
    """Factory for VitalReading instances, normal by default.

    Example:
        reading = reading_factory(heart_rate=110)
    """

    def _factory(
        subject_id: str = "P001",
        heart_rate=72.0,
        blood_pressure=120.0,
        body_temperature=36.8,
        oxygen_level=98.0,
        observed_at: Optional[date] = None,
    ) -> VitalReading:
        return VitalReading(
            subject_id=subject_id,
            heart_rate=heart_rate,
            blood_pressure=blood_pressure,
            body_temperature=body_temperature,
            oxygen_level=oxygen_level,
            observed_at=observed_at or date(2024, 3, 1),
        )

    return _factory


@pytest.fixture
def doctor_factory():
    """Factory for doctor UserRecords."""

    def _factory(
        user_id: str = "D001",
        name: str = "Gregory House",
        email: Optional[str] = "dr.house@example.com",
        phone: Optional[str] = "+14155550100",
    ) -> UserRecord:
        return UserRecord(
            user_id=user_id,
            name=name,
            email=email,
            phone=phone,
            profile=DoctorProfile(specialization="Diagnostics"),
        )

    return _factory


@pytest.fixture
def patient_factory():
    """Factory for patient UserRecords treated by D001 by default."""

    def _factory(
        user_id: str = "P001",
        name: str = "Jane Doe",
        email: Optional[str] = "jane.doe@example.com",
        phone: Optional[str] = "+14155550199",
        treating_doctor_id: Optional[str] = "D001",
    ) -> UserRecord:
        return UserRecord(
            user_id=user_id,
            name=name,
            email=email,
            phone=phone,
            profile=PatientProfile(
                birth_date=date(1980, 5, 17),
                admission_date=date(2024, 2, 1),
                treating_doctor_id=treating_doctor_id,
            ),
        )

    return _factory


@pytest.fixture
def alert_message_factory():
    """Factory for AlertMessage instances."""

    def _factory(
        subject_id: str = "P001",
        text: str = "Alert! Patient P001's vitals are abnormal",
        severity: Severity = Severity.EMERGENCY,
    ) -> AlertMessage:
        return AlertMessage(subject_id=subject_id, text=text, severity=severity)

    return _factory
