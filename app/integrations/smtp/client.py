"""SMTP mail transport used by the email channel."""

import smtplib
from email.message import EmailMessage
from typing import Optional, TYPE_CHECKING

from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class SmtpMailTransport:
    """Sends plain-text mail through an SMTP server.

    One SMTP session is opened per message. Failures are raised as
    smtplib.SMTPException or OSError for the caller to classify.
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self._password = password
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SmtpMailTransport":
        smtp = settings.smtp
        return cls(
            host=smtp.SMTP_HOST,
            port=smtp.SMTP_PORT,
            username=smtp.SMTP_USERNAME,
            password=(
                smtp.SMTP_PASSWORD.get_secret_value() if smtp.SMTP_PASSWORD else None
            ),
            use_tls=smtp.SMTP_USE_TLS,
            timeout=smtp.SMTP_TIMEOUT_SECONDS,
        )

    @property
    def requires_auth(self) -> bool:
        """True when the server session logs in before sending."""
        return bool(self.username)

    def send_mail(self, sender: str, recipient: str, subject: str, body: str) -> None:
        """Send a single message.

        Raises:
            smtplib.SMTPException: The server rejected the session or message.
            OSError: The server could not be reached.
        """
        message = EmailMessage()
        message["From"] = sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)

        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.requires_auth:
                server.login(self.username, self._password or "")
            server.send_message(message)

        logger.debug("smtp_message_sent", host=self.host, recipient=recipient)

    def verify_connection(self) -> None:
        """Open a session and log in without sending anything."""
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.requires_auth:
                server.login(self.username, self._password or "")
            server.noop()
