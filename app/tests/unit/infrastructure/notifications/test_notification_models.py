"""Unit tests for notification models."""

import pytest
from pydantic import ValidationError

from infrastructure.notifications.models import (
    AlertMessage,
    DeliveryError,
    DeliveryErrorKind,
    DispatchOutcome,
    Severity,
)
from infrastructure.operations import OperationResult


@pytest.mark.unit
class TestAlertMessage:
    """Tests for AlertMessage."""

    def test_defaults_to_info(self):
        message = AlertMessage(subject_id="P001", text="hello")

        assert message.severity == Severity.INFO
        assert message.subject == "RPMS Notification"

    def test_emergency_subject(self, alert_message_factory):
        assert alert_message_factory().subject == "RPMS Emergency Alert"

    @pytest.mark.parametrize("text", ["", "   "])
    def test_rejects_blank_text(self, text):
        with pytest.raises(ValidationError):
            AlertMessage(subject_id="P001", text=text)

    def test_is_frozen(self, alert_message_factory):
        message = alert_message_factory()

        with pytest.raises(ValidationError):
            message.text = "changed"


@pytest.mark.unit
class TestDeliveryError:
    """Tests for DeliveryError construction."""

    def test_invalid_address_result_maps_to_invalid_address_kind(self):
        result = OperationResult.permanent_error("bad", error_code="INVALID_ADDRESS")

        error = DeliveryError.from_result(result)

        assert error.kind == DeliveryErrorKind.INVALID_ADDRESS
        assert error.detail == "bad"

    def test_other_failures_map_to_transport(self):
        result = OperationResult.transient_error("down", error_code="HTTP_503")

        error = DeliveryError.from_result(result)

        assert error.kind == DeliveryErrorKind.TRANSPORT
        assert error.error_code == "HTTP_503"

    def test_transport_factory(self):
        error = DeliveryError.transport("boom", error_code="CHANNEL_EXCEPTION")

        assert error.kind == DeliveryErrorKind.TRANSPORT
        assert error.error_code == "CHANNEL_EXCEPTION"


@pytest.mark.unit
class TestDispatchOutcome:
    """Tests for DispatchOutcome properties."""

    def test_empty_outcome(self):
        outcome = DispatchOutcome()

        assert outcome.attempted == 0
        assert not outcome.is_success
        assert not outcome.is_partial_failure

    def test_all_delivered(self):
        outcome = DispatchOutcome(delivered=["a@example.com", "b@example.com"])

        assert outcome.attempted == 2
        assert outcome.is_success
        assert not outcome.is_partial_failure

    def test_partial_failure(self):
        outcome = DispatchOutcome(
            delivered=["a@example.com"],
            failed={"bad": DeliveryError.transport("down")},
        )

        assert outcome.attempted == 2
        assert not outcome.is_success
        assert outcome.is_partial_failure

    def test_total_failure_is_not_partial(self):
        outcome = DispatchOutcome(failed={"bad": DeliveryError.transport("down")})

        assert not outcome.is_success
        assert not outcome.is_partial_failure
