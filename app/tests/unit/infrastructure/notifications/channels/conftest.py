"""Fixtures for notification channel tests."""

from unittest.mock import MagicMock, Mock

import pytest


@pytest.fixture
def mock_mail_transport():
    """MagicMock SMTP transport that accepts every message."""
    transport = MagicMock()
    transport.requires_auth = True
    transport.send_mail.return_value = None
    transport.verify_connection.return_value = None
    return transport


@pytest.fixture
def twilio_response():
    """Factory for fake Twilio HTTP responses."""

    def _factory(status_code=201, payload=None, headers=None):
        response = Mock()
        response.status_code = status_code
        response.headers = headers or {}
        response.json = MagicMock(return_value=payload or {"sid": "SM123"})
        return response

    return _factory


@pytest.fixture
def mock_sms_client(twilio_response):
    """MagicMock Twilio client returning 201 Created."""
    client = MagicMock()
    client.send_message.return_value = twilio_response()
    client.fetch_account.return_value = twilio_response(status_code=200)
    return client
