"""Notification service for dependency injection.

Provides a class-based entry point to the channels and dispatchers so the
alerting features can be wired with real transports in production and with
fakes in tests.
"""

from typing import Dict, Optional, TYPE_CHECKING

from infrastructure.notifications.dispatcher import AlertDispatcher
from infrastructure.notifications.errors import MisconfiguredDispatcher
from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.notifications.channels.base import NotificationChannel


class NotificationService:
    """Class-based notification service.

    Owns the configured channels and hands out AlertDispatchers bound to one
    of them.

    Usage:
        from infrastructure.services import get_notification_service

        service = get_notification_service()
        outcome = service.dispatcher_for("email").dispatch(message, recipients)

        # Direct instantiation with test doubles
        service = NotificationService(settings, channels={"email": fake_channel})
    """

    def __init__(
        self,
        settings: "Settings",
        channels: Optional[Dict[str, "NotificationChannel"]] = None,
    ):
        """Initialize notification service.

        Args:
            settings: Settings instance (required, passed from provider).
            channels: Optional dict of channel name to NotificationChannel.
                If not provided, email and sms channels are built from
                settings with the SMTP and Twilio transports.
        """
        if channels is None:
            # Import here to avoid circular dependency at module level
            from infrastructure.notifications.channels.email import EmailChannel
            from infrastructure.notifications.channels.sms import SMSChannel
            from integrations.smtp import SmtpMailTransport
            from integrations.twilio import TwilioClient

            channels = {
                "email": EmailChannel(
                    settings=settings,
                    transport=SmtpMailTransport.from_settings(settings),
                ),
                "sms": SMSChannel(
                    settings=settings,
                    client=TwilioClient.from_settings(settings),
                ),
            }

        self._channels = channels
        self._settings = settings

    def register_channel(
        self, channel_name: str, channel: "NotificationChannel"
    ) -> None:
        """Register or replace a notification channel."""
        self._channels[channel_name] = channel

    def get_channel(self, channel_name: str) -> Optional["NotificationChannel"]:
        """Get a registered channel by name, or None."""
        return self._channels.get(channel_name)

    def list_channels(self) -> list[str]:
        """List all registered channel names."""
        return list(self._channels.keys())

    def dispatcher_for(self, channel_name: str) -> AlertDispatcher:
        """Build an AlertDispatcher bound to the named channel.

        Raises:
            MisconfiguredDispatcher: The channel is not registered.
        """
        channel = self._channels.get(channel_name)
        if channel is None:
            raise MisconfiguredDispatcher(
                f"Unknown notification channel '{channel_name}' "
                f"(available: {', '.join(self._channels) or 'none'})"
            )
        return AlertDispatcher(channel=channel)

    def send(
        self,
        channel_name: str,
        message: str,
        recipient: str,
        subject: Optional[str] = None,
    ) -> OperationResult:
        """Send a single message over the named channel.

        Raises:
            MisconfiguredDispatcher: The channel is not registered.
        """
        channel = self._channels.get(channel_name)
        if channel is None:
            raise MisconfiguredDispatcher(
                f"Unknown notification channel '{channel_name}'"
            )
        return channel.send(message, recipient, subject=subject)

    def health_check(self) -> Dict[str, bool]:
        """Check health of all channels.

        Returns:
            Dict mapping channel name to health status (True=healthy)
        """
        return {
            name: channel.health_check().is_success
            for name, channel in self._channels.items()
        }
