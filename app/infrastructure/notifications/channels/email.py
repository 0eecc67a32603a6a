"""Email channel implementation using an SMTP transport."""

from typing import Optional, Protocol, TYPE_CHECKING

import structlog
from pydantic import EmailStr, TypeAdapter, ValidationError

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import INVALID_ADDRESS
from infrastructure.operations import OperationResult, classify_smtp_error

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

_email_adapter = TypeAdapter(EmailStr)


class MailTransport(Protocol):
    """What the email channel needs from a mail transport."""

    @property
    def requires_auth(self) -> bool: ...

    def send_mail(
        self, sender: str, recipient: str, subject: str, body: str
    ) -> None: ...

    def verify_connection(self) -> None: ...


class EmailChannel(NotificationChannel):
    """Email notification channel.

    Sends plain-text mail through an injected SMTP transport. The sender
    address comes from settings (SMTP_SENDER, falling back to SMTP_USERNAME).
    """

    def __init__(self, settings: "Settings", transport: MailTransport):
        """Initialize email channel.

        Args:
            settings: Settings instance with smtp configuration.
            transport: Mail transport (SmtpMailTransport or a test double).
        """
        self._transport = transport
        self._sender = settings.smtp.sender
        logger.info(
            "initialized_email_channel",
            backend="smtp",
            sender=self._sender,
        )

    @property
    def channel_name(self) -> str:
        return "email"

    @property
    def requires_credentials(self) -> bool:
        return self._transport.requires_auth

    def validate_address(self, recipient: str) -> OperationResult:
        """Validate recipient email address (RFC 5322 via EmailStr)."""
        if not recipient or not recipient.strip():
            return OperationResult.permanent_error(
                message="Email address required",
                error_code=INVALID_ADDRESS,
            )

        try:
            address = _email_adapter.validate_python(recipient.strip())
        except ValidationError:
            return OperationResult.permanent_error(
                message=f"Invalid email address: {recipient}",
                error_code=INVALID_ADDRESS,
            )

        return OperationResult.success(
            message="Email validated",
            data={"address": address},
        )

    def send(
        self, message: str, recipient: str, subject: Optional[str] = None
    ) -> OperationResult:
        """Send an email to one recipient."""
        check = self.validate_address(recipient)
        if not check.is_success:
            logger.warning(
                "email_invalid_address",
                recipient=recipient,
                error=check.message,
            )
            return check

        address = check.data["address"]

        if not self._sender:
            return OperationResult.permanent_error(
                message="No sender address configured (SMTP_SENDER / SMTP_USERNAME)",
                error_code="MISSING_SENDER",
            )

        try:
            self._transport.send_mail(
                sender=self._sender,
                recipient=address,
                subject=subject or "RPMS Notification",
                body=message,
            )
        except Exception as e:
            result = classify_smtp_error(e)
            logger.error(
                "email_failed",
                recipient=address,
                error=result.message,
                error_code=result.error_code,
            )
            return result

        logger.info("email_sent", recipient=address, subject=subject)
        return OperationResult.success(
            message=f"Sent email to {address}",
            data={"address": address},
        )

    def health_check(self) -> OperationResult:
        """Check mail server connectivity and login."""
        try:
            self._transport.verify_connection()
        except Exception as e:
            logger.error("email_health_check_failed", error=str(e), exc_info=True)
            return classify_smtp_error(e)

        return OperationResult.success(
            message="Mail server reachable",
            data={"sender": self._sender},
        )
