"""Threshold evaluation of vital-sign readings.

Classification is a pure function of the reading and the range table: no
state, no I/O, safe to call from any thread.
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterable, List, Tuple

from modules.vitals.errors import InvalidReading
from modules.vitals.models import Metric, NormalRangeTable, VitalReading, Verdict


def _checked_value(reading: VitalReading, metric: Metric) -> float:
    value = reading.value_of(metric)
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidReading(
            f"{metric.value} is missing or not a number: {value!r}",
            metric=metric.value,
        )
    if not math.isfinite(value):
        raise InvalidReading(
            f"{metric.value} is not a finite number: {value!r}",
            metric=metric.value,
        )
    return float(value)


def evaluate(reading: VitalReading, ranges: NormalRangeTable) -> Verdict:
    """Classify a reading against the normal range table.

    Every metric is validated before any comparison, so an invalid reading
    never yields a partial verdict.

    Args:
        reading: VitalReading to classify.
        ranges: Normal ranges; oxygen level has a lower bound only.

    Returns:
        Verdict listing exactly the metrics outside their range.

    Raises:
        InvalidReading: A metric is missing, NaN or infinite.
    """
    values = {metric: _checked_value(reading, metric) for metric in Metric}
    violations = frozenset(
        metric for metric, value in values.items() if not ranges[metric].contains(value)
    )
    return Verdict(violations=violations)


@dataclass
class TriageResult:
    """A batch of readings split by verdict, preserving input order."""

    normal: List[VitalReading] = field(default_factory=list)
    abnormal: List[Tuple[VitalReading, Verdict]] = field(default_factory=list)

    @property
    def has_abnormal(self) -> bool:
        return bool(self.abnormal)


def triage(readings: Iterable[VitalReading], ranges: NormalRangeTable) -> TriageResult:
    """Split readings into normal and abnormal ones.

    Raises:
        InvalidReading: Any reading in the batch is invalid.
    """
    result = TriageResult()
    for reading in readings:
        verdict = evaluate(reading, ranges)
        if verdict.is_abnormal:
            result.abnormal.append((reading, verdict))
        else:
            result.normal.append(reading)
    return result


class ThresholdEvaluator:
    """Evaluator bound to one range table snapshot.

    Example:
        evaluator = ThresholdEvaluator(NormalRangeTable.default())
        verdict = evaluator.evaluate(reading)
    """

    def __init__(self, ranges: NormalRangeTable):
        self.ranges = ranges

    def evaluate(self, reading: VitalReading) -> Verdict:
        return evaluate(reading, self.ranges)

    def triage(self, readings: Iterable[VitalReading]) -> TriageResult:
        return triage(readings, self.ranges)
