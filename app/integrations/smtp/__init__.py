"""SMTP mail transport."""

from integrations.smtp.client import SmtpMailTransport

__all__ = ["SmtpMailTransport"]
