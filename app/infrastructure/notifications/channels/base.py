"""Notification channel abstract base class.

All channel implementations (Email, SMS) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.operations import OperationResult


class NotificationChannel(ABC):
    """Abstract base class for notification channels.

    A channel delivers one text message to one contact address:
    - EmailChannel: SMTP mail to an email address
    - SMSChannel: Twilio SMS to an E.164 phone number

    Channels never raise for delivery problems. A malformed address is
    reported with error_code INVALID_ADDRESS before any I/O; transport
    failures are classified into transient or permanent errors.

    Example Implementation:
        class PagerChannel(NotificationChannel):

            @property
            def channel_name(self) -> str:
                return "pager"

            @property
            def requires_credentials(self) -> bool:
                return False

            def send(self, message, recipient, subject=None) -> OperationResult:
                check = self.validate_address(recipient)
                if not check.is_success:
                    return check
                return self._page(recipient, message)
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier (email, sms)."""
        pass

    @property
    @abstractmethod
    def requires_credentials(self) -> bool:
        """Whether delivery needs authentication material.

        Callers use this to decide whether credentials have to be supplied
        before the channel is usable.
        """
        pass

    @abstractmethod
    def validate_address(self, recipient: str) -> OperationResult:
        """Check that recipient is usable on this channel.

        Returns:
            Success with the normalized address in data["address"], or a
            PERMANENT_ERROR with error_code INVALID_ADDRESS.
        """
        pass

    @abstractmethod
    def send(
        self, message: str, recipient: str, subject: Optional[str] = None
    ) -> OperationResult:
        """Deliver message to recipient.

        Args:
            message: Plain text body
            recipient: Contact address (email or phone number)
            subject: Optional subject line; channels without one ignore it

        Returns:
            OperationResult; failures carry an error_code instead of raising.
        """
        pass

    @abstractmethod
    def health_check(self) -> OperationResult:
        """Check channel health (connectivity, credentials)."""
        pass
