"""SMS channel implementation using Twilio."""

import re
from typing import Optional, Protocol, TYPE_CHECKING

import requests
import structlog

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import INVALID_ADDRESS
from infrastructure.operations import (
    OperationResult,
    classify_http_error,
    classify_http_status,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

# "+" followed by at least ten ASCII digits
PHONE_PATTERN = re.compile(r"^\+[0-9]{10,}$")

SMS_MAX_LENGTH = 1600


class SMSClient(Protocol):
    """What the SMS channel needs from a provider client."""

    def send_message(self, to: str, body: str) -> requests.Response: ...

    def fetch_account(self) -> requests.Response: ...


class SMSChannel(NotificationChannel):
    """SMS notification channel using the Twilio REST API.

    Requires phone numbers in E.164-like format (+14155550100).
    """

    def __init__(self, settings: "Settings", client: SMSClient):
        """Initialize SMS channel.

        Args:
            settings: Settings instance with twilio configuration.
            client: SMS provider client (TwilioClient or a test double).
        """
        self._client = client
        self._api_url = settings.twilio.TWILIO_API_URL
        logger.info("initialized_sms_channel", backend="twilio")

    @property
    def channel_name(self) -> str:
        return "sms"

    @property
    def requires_credentials(self) -> bool:
        return True

    def validate_address(self, recipient: str) -> OperationResult:
        """Validate recipient phone number."""
        phone = (recipient or "").strip()
        if not PHONE_PATTERN.match(phone):
            return OperationResult.permanent_error(
                message="Invalid phone number. Use E.164 format (e.g., +14155550100).",
                error_code=INVALID_ADDRESS,
            )

        return OperationResult.success(
            message="Phone number validated",
            data={"address": phone},
        )

    def send(
        self, message: str, recipient: str, subject: Optional[str] = None
    ) -> OperationResult:
        """Send an SMS to one recipient.

        The subject, if given, is prepended to the body.
        """
        check = self.validate_address(recipient)
        if not check.is_success:
            logger.warning("sms_invalid_address", error=check.message)
            return check

        phone = check.data["address"]
        body = f"{subject}: {message}" if subject else message

        if len(body) > SMS_MAX_LENGTH:
            logger.warning("sms_message_truncated", original_length=len(body))
            body = body[: SMS_MAX_LENGTH - 3] + "..."

        try:
            response = self._client.send_message(to=phone, body=body)
        except (requests.RequestException, ValueError) as e:
            result = classify_http_error(e)
            logger.error(
                "sms_send_error",
                error=result.message,
                error_code=result.error_code,
            )
            return result

        if response.status_code != 201:
            result = classify_http_status(
                response.status_code, response.headers.get("Retry-After")
            )
            logger.error(
                "sms_failed",
                status_code=response.status_code,
                error=result.message,
            )
            return result

        try:
            sid = response.json().get("sid")
        except ValueError:
            sid = None
        logger.info("sms_sent", message_sid=sid)
        return OperationResult.success(
            message=f"Sent SMS to {phone}",
            data={"address": phone, "message_sid": sid},
        )

    def health_check(self) -> OperationResult:
        """Check Twilio credentials by fetching the account resource."""
        try:
            response = self._client.fetch_account()
        except (requests.RequestException, ValueError) as e:
            logger.error("twilio_health_check_failed", error=str(e), exc_info=True)
            return classify_http_error(e)

        if response.status_code != 200:
            return classify_http_status(response.status_code)

        return OperationResult.success(
            message="Twilio API credentials valid",
            data={"api_url": self._api_url},
        )
