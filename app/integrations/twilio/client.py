"""Twilio REST client.

Thin wrapper over the Messages endpoint. Credentials come from settings and
are sent with HTTP basic auth; nothing is cached between calls apart from
the underlying requests.Session.
"""

from typing import Optional, TYPE_CHECKING

import requests

from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class TwilioClient:
    """Client for the Twilio Messages API."""

    def __init__(
        self,
        account_sid: Optional[str],
        auth_token: Optional[str],
        messaging_service_sid: Optional[str] = None,
        from_number: Optional[str] = None,
        api_url: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.account_sid = account_sid
        self._auth_token = auth_token
        self.messaging_service_sid = messaging_service_sid
        self.from_number = from_number
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(
        cls, settings: "Settings", session: Optional[requests.Session] = None
    ) -> "TwilioClient":
        twilio = settings.twilio
        return cls(
            account_sid=twilio.TWILIO_ACCOUNT_SID,
            auth_token=(
                twilio.TWILIO_AUTH_TOKEN.get_secret_value()
                if twilio.TWILIO_AUTH_TOKEN
                else None
            ),
            messaging_service_sid=twilio.TWILIO_MESSAGING_SERVICE_SID,
            from_number=twilio.TWILIO_FROM_NUMBER,
            api_url=twilio.TWILIO_API_URL,
            timeout=twilio.TWILIO_TIMEOUT_SECONDS,
            session=session,
        )

    @property
    def messages_url(self) -> str:
        return f"{self.api_url}/Accounts/{self.account_sid}/Messages.json"

    def _check_credentials(self) -> None:
        if not self.account_sid:
            logger.error("twilio_credentials_missing", missing="TWILIO_ACCOUNT_SID")
            raise ValueError("TWILIO_ACCOUNT_SID is missing")
        if not self._auth_token:
            logger.error("twilio_credentials_missing", missing="TWILIO_AUTH_TOKEN")
            raise ValueError("TWILIO_AUTH_TOKEN is missing")
        if not (self.messaging_service_sid or self.from_number):
            logger.error(
                "twilio_credentials_missing",
                missing="TWILIO_MESSAGING_SERVICE_SID or TWILIO_FROM_NUMBER",
            )
            raise ValueError(
                "Either TWILIO_MESSAGING_SERVICE_SID or TWILIO_FROM_NUMBER is required"
            )

    def send_message(self, to: str, body: str) -> requests.Response:
        """Post one SMS.

        Returns the raw response; Twilio answers 201 on success.

        Raises:
            ValueError: Credentials are not configured.
            requests.RequestException: The request could not be completed.
        """
        self._check_credentials()

        payload = {"To": to, "Body": body}
        if self.messaging_service_sid:
            payload["MessagingServiceSid"] = self.messaging_service_sid
        else:
            payload["From"] = self.from_number

        return self._session.post(
            self.messages_url,
            data=payload,
            auth=(self.account_sid, self._auth_token),
            timeout=self.timeout,
        )

    def fetch_account(self) -> requests.Response:
        """Fetch the account resource; used as a credentials health check."""
        self._check_credentials()
        return self._session.get(
            f"{self.api_url}/Accounts/{self.account_sid}.json",
            auth=(self.account_sid, self._auth_token),
            timeout=self.timeout,
        )
