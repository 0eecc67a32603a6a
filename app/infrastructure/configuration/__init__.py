"""Infrastructure configuration module - public API.

Centralized configuration for the RPMS alerting application using Pydantic
BaseSettings, organized by concern.

Exports:
    Settings: Main settings class
    SmtpSettings, TwilioSettings: Transport settings (for testing/overrides)
    VitalsFeatureSettings: Normal ranges and alert routing

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    sender = settings.smtp.sender
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import SmtpSettings, TwilioSettings
from infrastructure.configuration.features import VitalsFeatureSettings

__all__ = ["Settings", "SmtpSettings", "TwilioSettings", "VitalsFeatureSettings"]
