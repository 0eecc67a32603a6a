"""Unit tests for NotificationService."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.notifications.dispatcher import AlertDispatcher
from infrastructure.notifications.errors import MisconfiguredDispatcher
from infrastructure.notifications.service import NotificationService
from infrastructure.operations import OperationResult


@pytest.mark.unit
class TestNotificationService:
    """Tests for channel registry and dispatch helpers."""

    @pytest.fixture
    def service(self, mock_settings, recording_channel, sms_recording_channel):
        return NotificationService(
            mock_settings,
            channels={"email": recording_channel, "sms": sms_recording_channel},
        )

    def test_list_and_get_channels(self, service, recording_channel):
        assert set(service.list_channels()) == {"email", "sms"}
        assert service.get_channel("email") is recording_channel
        assert service.get_channel("pager") is None

    def test_register_channel(self, service):
        pager = MagicMock()

        service.register_channel("pager", pager)

        assert service.get_channel("pager") is pager

    def test_dispatcher_for_known_channel(self, service, sms_recording_channel):
        dispatcher = service.dispatcher_for("sms")

        assert isinstance(dispatcher, AlertDispatcher)
        assert dispatcher.channel is sms_recording_channel

    def test_dispatcher_for_unknown_channel_raises(self, service):
        with pytest.raises(MisconfiguredDispatcher, match="pager"):
            service.dispatcher_for("pager")

    def test_send_uses_named_channel(self, service, sms_recording_channel):
        result = service.send("sms", "hello", "+14155550100")

        assert result.is_success
        assert sms_recording_channel.calls == [("hello", "+14155550100", None)]

    def test_send_unknown_channel_raises(self, service):
        with pytest.raises(MisconfiguredDispatcher):
            service.send("pager", "hello", "someone")

    def test_health_check(self, service, recording_channel):
        recording_channel.health_check = MagicMock(
            return_value=OperationResult.transient_error("down")
        )

        assert service.health_check() == {"email": False, "sms": True}

    @patch("integrations.twilio.TwilioClient.from_settings")
    @patch("integrations.smtp.SmtpMailTransport.from_settings")
    def test_builds_default_channels_from_settings(
        self, mock_smtp_from_settings, mock_twilio_from_settings, mock_settings
    ):
        service = NotificationService(mock_settings)

        assert set(service.list_channels()) == {"email", "sms"}
        mock_smtp_from_settings.assert_called_once_with(mock_settings)
        mock_twilio_from_settings.assert_called_once_with(mock_settings)
