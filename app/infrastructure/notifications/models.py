"""Notification system core models.

Channel-agnostic models for alert dispatch. Features build the message
text; the dispatcher and channels handle delivery and report the outcome.

Uses Pydantic BaseModel for runtime validation and a consistent
serialization story for the presentation layer.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from infrastructure.operations import OperationResult

INVALID_ADDRESS = "INVALID_ADDRESS"


class Severity(Enum):
    """Alert severity levels."""

    INFO = "info"
    EMERGENCY = "emergency"


class AlertMessage(BaseModel):
    """A message about one subject (patient), ready for delivery.

    Constructed transiently; never persisted by the alerting pipeline.

    Attributes:
        subject_id: Patient the message concerns
        text: Plain text body (required, non-blank)
        severity: Severity level (default: INFO)

    Example:
        message = AlertMessage(
            subject_id="P001",
            text="Emergency! Patient P001 needs immediate attention.",
            severity=Severity.EMERGENCY,
        )
    """

    subject_id: str
    text: str
    severity: Severity = Severity.INFO

    model_config = {"frozen": True}

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Ensure message is not empty."""
        if not v or not v.strip():
            raise ValueError("Alert message text cannot be empty")
        return v

    @property
    def subject(self) -> str:
        """Subject line for channels that have one (email)."""
        if self.severity == Severity.EMERGENCY:
            return "RPMS Emergency Alert"
        return "RPMS Notification"


class DeliveryErrorKind(Enum):
    """Why a delivery to one recipient failed."""

    TRANSPORT = "transport"
    INVALID_ADDRESS = "invalid_address"


class DeliveryError(BaseModel):
    """Failure delivering to a single recipient.

    Attributes:
        kind: DeliveryErrorKind
        detail: Human-readable reason
        error_code: Machine error code from the channel (e.g. HTTP_500)
    """

    kind: DeliveryErrorKind
    detail: str
    error_code: Optional[str] = None

    @classmethod
    def from_result(cls, result: OperationResult) -> "DeliveryError":
        """Build from a failed channel OperationResult."""
        kind = (
            DeliveryErrorKind.INVALID_ADDRESS
            if result.error_code == INVALID_ADDRESS
            else DeliveryErrorKind.TRANSPORT
        )
        return cls(kind=kind, detail=result.message, error_code=result.error_code)

    @classmethod
    def transport(cls, detail: str, error_code: Optional[str] = None) -> "DeliveryError":
        return cls(kind=DeliveryErrorKind.TRANSPORT, detail=detail, error_code=error_code)


class DispatchOutcome(BaseModel):
    """Result of one dispatch call.

    Every recipient passed to the dispatcher appears in exactly one of
    ``delivered`` or ``failed``.

    Attributes:
        delivered: Addresses that accepted the message, in dispatch order
        failed: Address → DeliveryError for addresses that did not

    Example:
        outcome = dispatcher.dispatch(message, ["a@example.com", "+14155550100"])
        if outcome.is_partial_failure:
            for address, error in outcome.failed.items():
                print(address, error.detail)
    """

    delivered: List[str] = Field(default_factory=list)
    failed: Dict[str, DeliveryError] = Field(default_factory=dict)

    @property
    def attempted(self) -> int:
        """Number of distinct recipients the dispatch covered."""
        return len(self.delivered) + len(self.failed)

    @property
    def is_success(self) -> bool:
        """True if every recipient received the message."""
        return not self.failed and bool(self.delivered)

    @property
    def is_partial_failure(self) -> bool:
        """True if some, but not all, recipients failed."""
        return bool(self.failed) and bool(self.delivered)
