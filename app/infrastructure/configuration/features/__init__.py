"""Feature module settings."""

from infrastructure.configuration.features.vitals import VitalsFeatureSettings

__all__ = [
    "VitalsFeatureSettings",
]
