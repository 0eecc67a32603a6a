"""Twilio SMS integration settings."""

from pydantic import Field, SecretStr

from infrastructure.configuration.base import IntegrationSettings


class TwilioSettings(IntegrationSettings):
    """Twilio REST API configuration used by the SMS channel.

    Environment Variables:
        TWILIO_ACCOUNT_SID: Account SID (basic auth user)
        TWILIO_AUTH_TOKEN: Auth token (basic auth password)
        TWILIO_MESSAGING_SERVICE_SID: Messaging service used as sender
        TWILIO_FROM_NUMBER: Sender number, used when no messaging service is set
        TWILIO_API_URL: API base URL
        TWILIO_TIMEOUT_SECONDS: HTTP timeout for a single send
    """

    TWILIO_ACCOUNT_SID: str | None = Field(default=None, alias="TWILIO_ACCOUNT_SID")
    TWILIO_AUTH_TOKEN: SecretStr | None = Field(
        default=None, alias="TWILIO_AUTH_TOKEN"
    )
    TWILIO_MESSAGING_SERVICE_SID: str | None = Field(
        default=None, alias="TWILIO_MESSAGING_SERVICE_SID"
    )
    TWILIO_FROM_NUMBER: str | None = Field(default=None, alias="TWILIO_FROM_NUMBER")
    TWILIO_API_URL: str = Field(
        default="https://api.twilio.com/2010-04-01", alias="TWILIO_API_URL"
    )
    TWILIO_TIMEOUT_SECONDS: float = Field(default=30.0, alias="TWILIO_TIMEOUT_SECONDS")
