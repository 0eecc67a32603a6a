"""Vital-sign data models.

Frozen dataclasses, no runtime validation: readings come from an ingestion
collaborator and are checked by the threshold evaluator, which is where a
bad value has to be reported.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterator, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.configuration import VitalsFeatureSettings


class Metric(Enum):
    """Vital-sign metrics tracked per reading."""

    HEART_RATE = "heart_rate"
    BLOOD_PRESSURE = "blood_pressure"
    BODY_TEMPERATURE = "body_temperature"
    OXYGEN_LEVEL = "oxygen_level"

    @property
    def label(self) -> str:
        """Short label used in alert text."""
        return _LABELS[self]


_LABELS = {
    Metric.HEART_RATE: "HR",
    Metric.BLOOD_PRESSURE: "BP",
    Metric.BODY_TEMPERATURE: "Temp",
    Metric.OXYGEN_LEVEL: "O2",
}


@dataclass(frozen=True)
class VitalReading:
    """One set of vital signs for a patient.

    Attributes:
        subject_id: Patient the reading belongs to.
        heart_rate: Beats per minute.
        blood_pressure: mmHg.
        body_temperature: Degrees Celsius.
        oxygen_level: Oxygen saturation, percent.
        observed_at: Date of the checkup.
    """

    subject_id: str
    heart_rate: float
    blood_pressure: float
    body_temperature: float
    oxygen_level: float
    observed_at: date = field(default_factory=date.today)

    def value_of(self, metric: Metric) -> float:
        return getattr(self, metric.value)


@dataclass(frozen=True)
class NormalRange:
    """Inclusive range of normal values. upper=None means no upper bound."""

    lower: float
    upper: Optional[float] = None

    def __post_init__(self):
        bounds = [self.lower] if self.upper is None else [self.lower, self.upper]
        if not all(math.isfinite(b) for b in bounds):
            raise ValueError(f"Range bounds must be finite, got {bounds}")
        if self.upper is not None and self.lower > self.upper:
            raise ValueError(
                f"Lower bound {self.lower} exceeds upper bound {self.upper}"
            )

    def contains(self, value: float) -> bool:
        if value < self.lower:
            return False
        return self.upper is None or value <= self.upper


class NormalRangeTable(Mapping[Metric, NormalRange]):
    """Read-only mapping of metric to normal range.

    Loaded once at startup and shared; it cannot be modified after
    construction.
    """

    def __init__(self, ranges: Mapping[Metric, NormalRange]):
        missing = [m.value for m in Metric if m not in ranges]
        if missing:
            raise ValueError(f"Normal range missing for: {', '.join(missing)}")
        if ranges[Metric.OXYGEN_LEVEL].upper is not None:
            raise ValueError("Oxygen level range must not have an upper bound")
        self._ranges = MappingProxyType(dict(ranges))

    def __getitem__(self, metric: Metric) -> NormalRange:
        return self._ranges[metric]

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __repr__(self) -> str:
        return f"NormalRangeTable({dict(self._ranges)!r})"

    @classmethod
    def default(cls) -> "NormalRangeTable":
        """Adult clinical defaults."""
        return cls(
            {
                Metric.HEART_RATE: NormalRange(60, 100),
                Metric.BLOOD_PRESSURE: NormalRange(90, 140),
                Metric.BODY_TEMPERATURE: NormalRange(36.1, 37.2),
                Metric.OXYGEN_LEVEL: NormalRange(95),
            }
        )

    @classmethod
    def from_settings(cls, vitals: "VitalsFeatureSettings") -> "NormalRangeTable":
        """Build the table from VitalsFeatureSettings."""
        return cls(
            {
                Metric.HEART_RATE: NormalRange(
                    vitals.heart_rate_min, vitals.heart_rate_max
                ),
                Metric.BLOOD_PRESSURE: NormalRange(
                    vitals.blood_pressure_min, vitals.blood_pressure_max
                ),
                Metric.BODY_TEMPERATURE: NormalRange(
                    vitals.body_temperature_min, vitals.body_temperature_max
                ),
                Metric.OXYGEN_LEVEL: NormalRange(vitals.oxygen_level_min),
            }
        )


@dataclass(frozen=True)
class Verdict:
    """Classification of a reading: normal, or abnormal with its violations."""

    violations: FrozenSet[Metric] = frozenset()

    @property
    def is_abnormal(self) -> bool:
        return bool(self.violations)

    @property
    def is_normal(self) -> bool:
        return not self.violations

    @property
    def labels(self) -> list[str]:
        """Labels of the violating metrics, in Metric declaration order."""
        return [m.label for m in Metric if m in self.violations]


Verdict.NORMAL = Verdict()
