"""SMTP mail server integration settings."""

from pydantic import Field, SecretStr

from infrastructure.configuration.base import IntegrationSettings


class SmtpSettings(IntegrationSettings):
    """Outbound mail server configuration used by the email channel.

    Credentials are only ever read from the environment; there are no
    built-in fallback values.

    Environment Variables:
        SMTP_HOST: Mail server hostname
        SMTP_PORT: Mail server port (587 for STARTTLS)
        SMTP_USERNAME: Login user; leave unset for unauthenticated relays
        SMTP_PASSWORD: Login password or app password
        SMTP_USE_TLS: Upgrade the connection with STARTTLS
        SMTP_SENDER: From address; defaults to SMTP_USERNAME
        SMTP_TIMEOUT_SECONDS: Socket timeout for the SMTP session

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        host = settings.smtp.SMTP_HOST
        ```
    """

    SMTP_HOST: str = Field(default="smtp.gmail.com", alias="SMTP_HOST")
    SMTP_PORT: int = Field(default=587, alias="SMTP_PORT")
    SMTP_USERNAME: str | None = Field(default=None, alias="SMTP_USERNAME")
    SMTP_PASSWORD: SecretStr | None = Field(default=None, alias="SMTP_PASSWORD")
    SMTP_USE_TLS: bool = Field(default=True, alias="SMTP_USE_TLS")
    SMTP_SENDER: str | None = Field(default=None, alias="SMTP_SENDER")
    SMTP_TIMEOUT_SECONDS: float = Field(default=30.0, alias="SMTP_TIMEOUT_SECONDS")

    @property
    def sender(self) -> str | None:
        """Address used in the From header."""
        return self.SMTP_SENDER or self.SMTP_USERNAME
