"""Alert dispatcher: fan one message out to many recipients over one channel.

Delivery is best-effort across recipients:
- Recipients are attempted in input order
- A failure for one recipient is recorded and the batch continues
- Configuration problems are raised before any send is attempted
- Nothing is retried here; retry policy belongs to the caller

Usage Example:
    from infrastructure.notifications import (
        AlertDispatcher,
        AlertMessage,
        Severity,
    )

    dispatcher = AlertDispatcher(channel=email_channel)

    message = AlertMessage(
        subject_id="P001",
        text="Emergency! Patient P001 needs immediate attention.",
        severity=Severity.EMERGENCY,
    )

    outcome = dispatcher.dispatch(message, ["dr.house@example.com"])
    if outcome.failed:
        logger.warning("alert_partially_failed", failed=list(outcome.failed))
"""

from typing import Iterable, Optional

import structlog

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.errors import MisconfiguredDispatcher
from infrastructure.notifications.models import (
    AlertMessage,
    DeliveryError,
    DispatchOutcome,
)

logger = structlog.get_logger()


class AlertDispatcher:
    """Single-channel, multi-recipient alert dispatcher.

    The dispatcher does not keep the recipient list between calls; the
    caller owns it for the duration of one dispatch.

    Attributes:
        channel: NotificationChannel used for every recipient

    Example:
        dispatcher = AlertDispatcher(channel=SMSChannel(settings, client))
        outcome = dispatcher.dispatch(message, ["+14155550100", "+14155550101"])
    """

    def __init__(self, channel: Optional[NotificationChannel]):
        self.channel = channel

    def dispatch(
        self, message: AlertMessage, recipients: Iterable[str]
    ) -> DispatchOutcome:
        """Deliver message to every recipient.

        Process:
        1. Fail fast if no channel is bound or recipients is empty
        2. For each distinct recipient, in order, call channel.send
        3. Record the address under delivered or failed
        4. Return the DispatchOutcome

        Args:
            message: AlertMessage to deliver
            recipients: Non-empty iterable of contact addresses

        Returns:
            DispatchOutcome covering every distinct recipient

        Raises:
            MisconfiguredDispatcher: No channel bound, or no recipients.
        """
        if self.channel is None:
            raise MisconfiguredDispatcher("Notification service misconfigured: no channel bound")
        recipients = list(recipients)
        if not recipients:
            raise MisconfiguredDispatcher("Notification service misconfigured: no recipients")

        outcome = DispatchOutcome()
        seen = set()

        for recipient in recipients:
            if recipient in seen:
                continue
            seen.add(recipient)

            try:
                result = self.channel.send(
                    message.text, recipient, subject=message.subject
                )
            except Exception as e:
                logger.error(
                    "channel_exception",
                    channel_name=self.channel.channel_name,
                    error=str(e),
                    exc_info=True,
                )
                outcome.failed[recipient] = DeliveryError.transport(
                    f"Channel exception: {e}", error_code="CHANNEL_EXCEPTION"
                )
                continue

            if result.is_success:
                outcome.delivered.append(recipient)
            else:
                outcome.failed[recipient] = DeliveryError.from_result(result)

        if outcome.failed:
            logger.warning(
                "alert_dispatch_incomplete",
                channel_name=self.channel.channel_name,
                subject_id=message.subject_id,
                severity=message.severity.value,
                delivered_count=len(outcome.delivered),
                failed_count=len(outcome.failed),
            )
        else:
            logger.info(
                "alert_dispatched",
                channel_name=self.channel.channel_name,
                subject_id=message.subject_id,
                severity=message.severity.value,
                delivered_count=len(outcome.delivered),
            )

        return outcome
