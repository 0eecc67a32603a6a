"""Alert context binding for structured logging.

Binds a correlation id and the patient being handled to every log entry
emitted while an alert is evaluated and dispatched.

Usage:
    from infrastructure.logging import bind_alert_context

    with bind_alert_context(patient_id="P001", alert_kind="panic"):
        logger.info("panic_button_pressed")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_alert_context(
    correlation_id: Optional[str] = None,
    patient_id: Optional[str] = None,
    alert_kind: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind alert-scoped context to all logs within the block.

    Args:
        correlation_id: Identifier tying together one alert's log entries.
            Generated if not provided.
        patient_id: Patient the alert concerns.
        alert_kind: "vital", "panic", "digest", "reminder" or "direct".
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation id in effect.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if patient_id is not None:
        context["patient_id"] = patient_id

    if alert_kind is not None:
        context["alert_kind"] = alert_kind

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_alert_context() -> None:
    """Clear all alert-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
