"""Unit tests for vital-sign models."""

import pytest

from modules.vitals.models import Metric, NormalRange, NormalRangeTable, Verdict


@pytest.mark.unit
class TestNormalRange:
    """Tests for NormalRange."""

    def test_bounds_are_inclusive(self):
        heart_rate = NormalRange(60, 100)

        assert heart_rate.contains(60)
        assert heart_rate.contains(100)
        assert not heart_rate.contains(59.99)
        assert not heart_rate.contains(100.01)

    def test_open_upper_bound(self):
        oxygen = NormalRange(95)

        assert oxygen.contains(95)
        assert oxygen.contains(100)
        assert oxygen.contains(250)
        assert not oxygen.contains(94.9)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError):
            NormalRange(100, 60)

    @pytest.mark.parametrize(
        "lower, upper", [(float("nan"), 100), (60, float("nan")), (60, float("inf"))]
    )
    def test_non_finite_bounds_rejected(self, lower, upper):
        with pytest.raises(ValueError, match="finite"):
            NormalRange(lower, upper)


@pytest.mark.unit
class TestNormalRangeTable:
    """Tests for NormalRangeTable."""

    def test_default_table(self):
        table = NormalRangeTable.default()

        assert table[Metric.HEART_RATE] == NormalRange(60, 100)
        assert table[Metric.BLOOD_PRESSURE] == NormalRange(90, 140)
        assert table[Metric.BODY_TEMPERATURE] == NormalRange(36.1, 37.2)
        assert table[Metric.OXYGEN_LEVEL] == NormalRange(95)
        assert len(table) == 4

    def test_missing_metric_rejected(self):
        with pytest.raises(ValueError, match="oxygen_level"):
            NormalRangeTable(
                {
                    Metric.HEART_RATE: NormalRange(60, 100),
                    Metric.BLOOD_PRESSURE: NormalRange(90, 140),
                    Metric.BODY_TEMPERATURE: NormalRange(36.1, 37.2),
                }
            )

    def test_oxygen_upper_bound_rejected(self):
        ranges = dict(NormalRangeTable.default())
        ranges[Metric.OXYGEN_LEVEL] = NormalRange(95, 100)

        with pytest.raises(ValueError, match="Oxygen"):
            NormalRangeTable(ranges)

    def test_table_is_read_only(self):
        table = NormalRangeTable.default()

        with pytest.raises(TypeError):
            table[Metric.HEART_RATE] = NormalRange(0, 1)

    def test_source_mapping_changes_do_not_leak(self):
        ranges = dict(NormalRangeTable.default())
        table = NormalRangeTable(ranges)

        ranges[Metric.HEART_RATE] = NormalRange(0, 1)

        assert table[Metric.HEART_RATE] == NormalRange(60, 100)

    def test_from_settings(self):
        from infrastructure.configuration import VitalsFeatureSettings

        vitals = VitalsFeatureSettings(HEART_RATE_MIN=50, HEART_RATE_MAX=110)

        table = NormalRangeTable.from_settings(vitals)

        assert table[Metric.HEART_RATE] == NormalRange(50, 110)
        assert table[Metric.OXYGEN_LEVEL].upper is None


@pytest.mark.unit
class TestVerdict:
    """Tests for Verdict."""

    def test_normal(self):
        verdict = Verdict()

        assert verdict.is_normal
        assert not verdict.is_abnormal
        assert verdict.labels == []

    def test_labels_follow_metric_order(self):
        verdict = Verdict(violations=frozenset({Metric.OXYGEN_LEVEL, Metric.HEART_RATE}))

        assert verdict.is_abnormal
        assert verdict.labels == ["HR", "O2"]
