"""Vital-sign readings and threshold evaluation."""

from modules.vitals.errors import InvalidReading
from modules.vitals.models import (
    Metric,
    NormalRange,
    NormalRangeTable,
    Verdict,
    VitalReading,
)
from modules.vitals.thresholds import (
    ThresholdEvaluator,
    TriageResult,
    evaluate,
    triage,
)

__all__ = [
    "InvalidReading",
    "Metric",
    "NormalRange",
    "NormalRangeTable",
    "Verdict",
    "VitalReading",
    "ThresholdEvaluator",
    "TriageResult",
    "evaluate",
    "triage",
]
