"""Unit tests for EmailChannel (SMTP implementation)."""

import smtplib

import pytest

from infrastructure.notifications.channels.email import EmailChannel
from infrastructure.operations import OperationStatus


@pytest.mark.unit
class TestEmailChannel:
    """Tests for EmailChannel implementation."""

    @pytest.fixture
    def email_channel(self, mock_settings, mock_mail_transport):
        return EmailChannel(settings=mock_settings, transport=mock_mail_transport)

    def test_channel_name(self, email_channel):
        assert email_channel.channel_name == "email"

    def test_requires_credentials_follows_transport(
        self, email_channel, mock_mail_transport
    ):
        assert email_channel.requires_credentials is True

        mock_mail_transport.requires_auth = False

        assert email_channel.requires_credentials is False

    def test_validate_address_accepts_valid_email(self, email_channel):
        result = email_channel.validate_address(" dr.house@example.com ")

        assert result.is_success
        assert result.data["address"] == "dr.house@example.com"

    @pytest.mark.parametrize("address", ["", "   ", "not-an-email", "a@", "@example.com"])
    def test_validate_address_rejects_invalid(self, email_channel, address):
        result = email_channel.validate_address(address)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_ADDRESS"

    def test_send_success(self, email_channel, mock_mail_transport):
        result = email_channel.send(
            "Alert! Patient P001's vitals are abnormal",
            "dr.house@example.com",
            subject="RPMS Emergency Alert",
        )

        assert result.is_success
        mock_mail_transport.send_mail.assert_called_once_with(
            sender="rpms@example.com",
            recipient="dr.house@example.com",
            subject="RPMS Emergency Alert",
            body="Alert! Patient P001's vitals are abnormal",
        )

    def test_send_defaults_subject(self, email_channel, mock_mail_transport):
        email_channel.send("hello", "dr.house@example.com")

        assert mock_mail_transport.send_mail.call_args.kwargs["subject"] == "RPMS Notification"

    def test_invalid_address_never_reaches_transport(
        self, email_channel, mock_mail_transport
    ):
        result = email_channel.send("hello", "not-an-email")

        assert result.error_code == "INVALID_ADDRESS"
        mock_mail_transport.send_mail.assert_not_called()

    def test_missing_sender(self, mock_settings, mock_mail_transport):
        mock_settings.smtp.sender = None
        channel = EmailChannel(settings=mock_settings, transport=mock_mail_transport)

        result = channel.send("hello", "dr.house@example.com")

        assert result.error_code == "MISSING_SENDER"
        mock_mail_transport.send_mail.assert_not_called()

    def test_auth_failure_is_permanent(self, email_channel, mock_mail_transport):
        mock_mail_transport.send_mail.side_effect = smtplib.SMTPAuthenticationError(
            535, b"bad credentials"
        )

        result = email_channel.send("hello", "dr.house@example.com")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "AUTH_FAILED"

    def test_connection_failure_is_transient(self, email_channel, mock_mail_transport):
        mock_mail_transport.send_mail.side_effect = ConnectionRefusedError("refused")

        result = email_channel.send("hello", "dr.house@example.com")

        assert result.is_transient
        assert result.error_code == "CONNECTION_ERROR"

    def test_health_check_success(self, email_channel):
        result = email_channel.health_check()

        assert result.is_success
        assert result.data == {"sender": "rpms@example.com"}

    def test_health_check_failure(self, email_channel, mock_mail_transport):
        mock_mail_transport.verify_connection.side_effect = smtplib.SMTPServerDisconnected(
            "gone"
        )

        assert not email_channel.health_check().is_success
