"""Twilio SMS REST client."""

from integrations.twilio.client import TwilioClient

__all__ = ["TwilioClient"]
