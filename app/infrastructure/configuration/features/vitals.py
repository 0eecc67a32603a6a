"""Vital-sign alerting feature settings."""

from typing import Literal

from pydantic import Field, model_validator

from infrastructure.configuration.base import FeatureSettings


class VitalsFeatureSettings(FeatureSettings):
    """Normal ranges and alert routing for vital-sign monitoring.

    Ranges are inclusive. Oxygen saturation only has a lower bound: a high
    reading is never abnormal on its own.

    Environment Variables:
        HEART_RATE_MIN / HEART_RATE_MAX: beats per minute
        BLOOD_PRESSURE_MIN / BLOOD_PRESSURE_MAX: mmHg
        BODY_TEMPERATURE_MIN / BODY_TEMPERATURE_MAX: degrees Celsius
        OXYGEN_LEVEL_MIN: saturation percentage
        ALERT_CHANNEL: channel used for emergency alerts ("email" or "sms")

    Example:
        ```python
        from infrastructure.services import get_settings
        from modules.vitals import NormalRangeTable

        settings = get_settings()
        ranges = NormalRangeTable.from_settings(settings.vitals)
        ```
    """

    heart_rate_min: float = Field(
        default=60.0, alias="HEART_RATE_MIN", allow_inf_nan=False
    )
    heart_rate_max: float = Field(
        default=100.0, alias="HEART_RATE_MAX", allow_inf_nan=False
    )
    blood_pressure_min: float = Field(
        default=90.0, alias="BLOOD_PRESSURE_MIN", allow_inf_nan=False
    )
    blood_pressure_max: float = Field(
        default=140.0, alias="BLOOD_PRESSURE_MAX", allow_inf_nan=False
    )
    body_temperature_min: float = Field(
        default=36.1, alias="BODY_TEMPERATURE_MIN", allow_inf_nan=False
    )
    body_temperature_max: float = Field(
        default=37.2, alias="BODY_TEMPERATURE_MAX", allow_inf_nan=False
    )
    oxygen_level_min: float = Field(
        default=95.0, alias="OXYGEN_LEVEL_MIN", allow_inf_nan=False
    )

    alert_channel: Literal["email", "sms"] = Field(
        default="email",
        alias="ALERT_CHANNEL",
        description="Notification channel used for emergency alerts",
    )

    @model_validator(mode="after")
    def _validate_bounds(self) -> "VitalsFeatureSettings":
        """Reject ranges whose lower bound exceeds the upper bound."""
        pairs = {
            "HEART_RATE": (self.heart_rate_min, self.heart_rate_max),
            "BLOOD_PRESSURE": (self.blood_pressure_min, self.blood_pressure_max),
            "BODY_TEMPERATURE": (
                self.body_temperature_min,
                self.body_temperature_max,
            ),
        }
        for name, (low, high) in pairs.items():
            if low > high:
                raise ValueError(
                    f"{name}_MIN ({low}) must not exceed {name}_MAX ({high})"
                )
        return self
