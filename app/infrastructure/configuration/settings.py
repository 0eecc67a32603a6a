"""RPMS alerting configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    SmtpSettings,
    TwilioSettings,
)

# Feature settings
from infrastructure.configuration.features import VitalsFeatureSettings


class Settings(BaseSettings):
    """RPMS alerting configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Integrations**: mail server (smtp) and SMS provider (twilio)
    - **Features**: vital-sign ranges and alert routing (vitals)

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        smtp_host = settings.smtp.SMTP_HOST
        alert_channel = settings.vitals.alert_channel

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Integration settings
    smtp: SmtpSettings
    twilio: TwilioSettings

    # Feature settings
    vitals: VitalsFeatureSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty (production)."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "smtp": SmtpSettings,
            "twilio": TwilioSettings,
            "vitals": VitalsFeatureSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
