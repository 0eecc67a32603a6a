"""Fixtures for alerts module tests."""

import pytest

from infrastructure.notifications import AlertDispatcher, NotificationService
from modules.alerts import AlertingService
from modules.care import InMemoryCareDirectory
from modules.vitals import NormalRangeTable, ThresholdEvaluator


@pytest.fixture
def evaluator():
    return ThresholdEvaluator(NormalRangeTable.default())


@pytest.fixture
def dispatcher(recording_channel):
    """Dispatcher bound to the recording email channel."""
    return AlertDispatcher(channel=recording_channel)


@pytest.fixture
def patient(patient_factory):
    return patient_factory()


@pytest.fixture
def doctor(doctor_factory):
    return doctor_factory()


@pytest.fixture
def directory(patient, doctor):
    return InMemoryCareDirectory(users=[patient, doctor])


@pytest.fixture
def notifications(mock_settings, recording_channel, sms_recording_channel):
    return NotificationService(
        mock_settings,
        channels={"email": recording_channel, "sms": sms_recording_channel},
    )


@pytest.fixture
def alerting_service(directory, notifications):
    """AlertingService alerting over email with default ranges."""
    return AlertingService(directory=directory, notifications=notifications)
