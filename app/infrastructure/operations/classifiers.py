"""Error classifiers for transport exceptions.

Converts transport-specific exceptions (requests for the SMS REST API,
smtplib for mail) into standardized OperationResult objects so channels can
report a failure as a value instead of letting the exception escape.

Key Functions:
- classify_http_error(): requests exceptions → OperationResult
- classify_http_status(): non-2xx provider status codes → OperationResult
- classify_smtp_error(): smtplib / socket errors → OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = client.send_message(to=phone_number, body=message)
    except requests.RequestException as exc:
        return classify_http_error(exc)
"""

import smtplib
from typing import Optional

import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def classify_http_status(
    status_code: int, retry_after: Optional[str] = None
) -> OperationResult:
    """Classify a provider HTTP status code into OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401/403: Credentials rejected → PERMANENT_ERROR
    - 5xx: Provider error → TRANSIENT_ERROR
    - Other 4xx: Request rejected → PERMANENT_ERROR

    Args:
        status_code: HTTP status returned by the provider
        retry_after: Raw Retry-After header value, if any

    Returns:
        OperationResult with error_code HTTP_<status>
    """
    error_code = f"HTTP_{status_code}"

    if status_code == 429:
        delay = 60
        if retry_after:
            try:
                delay = int(retry_after)
            except (ValueError, TypeError):
                pass
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "SMS provider rate limited",
            error_code=error_code,
            retry_after=delay,
        )

    if status_code in (401, 403):
        return OperationResult.permanent_error(
            f"SMS provider rejected credentials (HTTP {status_code})",
            error_code=error_code,
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"SMS provider server error (HTTP {status_code})",
            error_code=error_code,
        )

    return OperationResult.permanent_error(
        f"SMS provider error: HTTP {status_code}",
        error_code=error_code,
    )


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify requests exceptions into OperationResult.

    Args:
        exc: Exception raised while talking to an HTTP provider

    Returns:
        OperationResult with a transient or permanent status
    """
    if isinstance(exc, requests.exceptions.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {exc}",
            error_code="TIMEOUT",
        )

    if isinstance(exc, requests.exceptions.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}",
            error_code="CONNECTION_ERROR",
        )

    if isinstance(exc, requests.exceptions.HTTPError) and exc.response is not None:
        return classify_http_status(
            exc.response.status_code, exc.response.headers.get("Retry-After")
        )

    if isinstance(exc, ValueError):
        # Missing credentials surface as ValueError from the client
        return OperationResult.permanent_error(
            f"SMS client misconfigured: {exc}",
            error_code="MISSING_CREDENTIALS",
        )

    return OperationResult.transient_error(
        f"HTTP error: {type(exc).__name__}: {exc}",
        error_code="HTTP_ERROR",
    )


def classify_smtp_error(exc: Exception) -> OperationResult:
    """Classify smtplib and socket errors into OperationResult.

    Error Mapping:
    - SMTPAuthenticationError → PERMANENT_ERROR (AUTH_FAILED)
    - SMTPRecipientsRefused → PERMANENT_ERROR (RECIPIENT_REFUSED)
    - SMTPSenderRefused → PERMANENT_ERROR (SENDER_REFUSED)
    - SMTPServerDisconnected / SMTPConnectError / OSError → TRANSIENT_ERROR
    - Other SMTPException → TRANSIENT_ERROR (SMTP_ERROR)

    Args:
        exc: Exception raised by the mail transport

    Returns:
        OperationResult with a transient or permanent status
    """
    if isinstance(exc, smtplib.SMTPAuthenticationError):
        return OperationResult.permanent_error(
            "SMTP authentication failed",
            error_code="AUTH_FAILED",
        )

    if isinstance(exc, smtplib.SMTPRecipientsRefused):
        return OperationResult.permanent_error(
            f"SMTP server refused recipient: {list(exc.recipients)}",
            error_code="RECIPIENT_REFUSED",
        )

    if isinstance(exc, smtplib.SMTPSenderRefused):
        return OperationResult.permanent_error(
            f"SMTP server refused sender {exc.sender}",
            error_code="SENDER_REFUSED",
        )

    if isinstance(
        exc, (smtplib.SMTPServerDisconnected, smtplib.SMTPConnectError)
    ):
        return OperationResult.transient_error(
            f"SMTP connection error: {exc}",
            error_code="CONNECTION_ERROR",
        )

    if isinstance(exc, smtplib.SMTPException):
        return OperationResult.transient_error(
            f"SMTP error: {exc}",
            error_code="SMTP_ERROR",
        )

    if isinstance(exc, OSError):
        return OperationResult.transient_error(
            f"SMTP connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    return OperationResult.transient_error(
        f"Error sending email: {type(exc).__name__}: {exc}",
        error_code="SEND_ERROR",
    )
