"""Unit tests for the abnormal upload digest."""

from datetime import date

import pytest

from infrastructure.notifications import MisconfiguredDispatcher
from modules.alerts.digest import format_digest, send_abnormal_digest
from modules.vitals import InvalidReading, Verdict
from modules.vitals.models import Metric


@pytest.mark.unit
class TestFormatDigest:
    """Tests for digest text."""

    def test_one_line_per_abnormal_reading(self, reading_factory):
        reading = reading_factory(
            heart_rate=110, oxygen_level=90, observed_at=date(2024, 3, 2)
        )
        verdict = Verdict(violations=frozenset({Metric.HEART_RATE, Metric.OXYGEN_LEVEL}))

        text = format_digest("P001", [(reading, verdict)])

        assert text == (
            "Abnormal vitals detected for patient P001:\n"
            "Date: 2024-03-02, HR: 110.00, BP: 120.00, Temp: 36.80, O2: 90.00 "
            "(out of range: HR, O2)"
        )


@pytest.mark.unit
class TestSendAbnormalDigest:
    """Tests for send_abnormal_digest()."""

    def test_all_normal_sends_nothing(
        self, reading_factory, evaluator, dispatcher, recording_channel
    ):
        readings = [reading_factory(), reading_factory(heart_rate=80)]

        report = send_abnormal_digest(
            "P001", readings, evaluator, dispatcher, ["dr.house@example.com"]
        )

        assert report.normal == readings
        assert report.abnormal == []
        assert report.outcome is None
        assert not report.was_sent
        assert recording_channel.call_count == 0

    def test_single_digest_for_abnormal_batch(
        self, reading_factory, evaluator, dispatcher, recording_channel
    ):
        readings = [
            reading_factory(heart_rate=130, observed_at=date(2024, 3, 1)),
            reading_factory(),
            reading_factory(body_temperature=38.5, observed_at=date(2024, 3, 3)),
        ]

        report = send_abnormal_digest(
            "P001", readings, evaluator, dispatcher, ["dr.house@example.com"]
        )

        assert report.was_sent
        assert report.outcome.delivered == ["dr.house@example.com"]
        assert len(report.normal) == 1
        assert len(report.abnormal) == 2
        assert recording_channel.call_count == 1
        text, _, subject = recording_channel.calls[0]
        assert text.startswith("Abnormal vitals detected for patient P001:")
        assert "Date: 2024-03-01" in text
        assert "Date: 2024-03-03" in text
        assert subject == "RPMS Notification"

    def test_invalid_reading_sends_nothing(
        self, reading_factory, evaluator, dispatcher, recording_channel
    ):
        readings = [reading_factory(heart_rate=130), reading_factory(oxygen_level=None)]

        with pytest.raises(InvalidReading):
            send_abnormal_digest("P001", readings, evaluator, dispatcher, ["a@example.com"])

        assert recording_channel.call_count == 0

    def test_no_recipients_with_abnormal_readings(
        self, reading_factory, evaluator, dispatcher
    ):
        with pytest.raises(MisconfiguredDispatcher):
            send_abnormal_digest(
                "P001", [reading_factory(heart_rate=130)], evaluator, dispatcher, []
            )
