"""Unit tests for EventStats."""

import math
import statistics

import pytest

from eventsim import EventStats
from eventsim.stats.event_stats import T_CRITICAL_95, t_critical_95


def _filled(values, name="Waiting Time"):
    stats = EventStats(name)
    for v in values:
        stats.add(v)
    return stats


class TestEmpty:
    def test_sentinels_are_zero(self):
        stats = EventStats("empty")
        assert stats.count() == 0
        assert stats.mean() == 0.0
        assert stats.standard_deviation() == 0.0
        assert stats.min() == 0.0
        assert stats.max() == 0.0

    def test_confidence_interval_requires_two_observations(self):
        with pytest.raises(ValueError):
            EventStats("empty").confidence_interval_95()
        with pytest.raises(ValueError):
            _filled([3.0]).confidence_interval_95()


class TestSummaries:
    def test_one_to_five(self):
        stats = _filled([1, 2, 3, 4, 5])
        assert stats.count() == 5
        assert stats.mean() == pytest.approx(3.0)
        assert stats.standard_deviation() == pytest.approx(1.5811, abs=1e-3)
        assert stats.min() == 1
        assert stats.max() == 5

    def test_single_observation_has_zero_std(self):
        stats = _filled([7.5])
        assert stats.mean() == 7.5
        assert stats.standard_deviation() == 0.0
        assert stats.min() == stats.max() == 7.5

    def test_uses_sample_divisor(self):
        values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert _filled(values).standard_deviation() == pytest.approx(statistics.stdev(values))

    def test_negative_values(self):
        stats = _filled([-3.0, 1.0, -8.0])
        assert stats.min() == -8.0
        assert stats.max() == 1.0

    def test_observations_keep_insertion_order(self):
        stats = _filled([3.0, 1.0, 2.0])
        assert stats.observations == (3.0, 1.0, 2.0)


class TestConfidenceInterval:
    def test_two_observations_use_df1(self):
        stats = _filled([1.0, 3.0])
        lower, upper = stats.confidence_interval_95()
        margin = 12.706 * statistics.stdev([1.0, 3.0]) / math.sqrt(2)
        assert lower == pytest.approx(2.0 - margin)
        assert upper == pytest.approx(2.0 + margin)

    def test_constant_observations_collapse_interval(self):
        lower, upper = _filled([4.0] * 10).confidence_interval_95()
        assert lower == pytest.approx(4.0)
        assert upper == pytest.approx(4.0)

    def test_switches_from_t_to_normal_after_thirty(self):
        values = [0.0, 100.0] * 15
        stats = _filled(values)
        lower30, upper30 = stats.confidence_interval_95()

        margin30 = 2.045 * statistics.stdev(values) / math.sqrt(30)
        assert lower30 == pytest.approx(50.0 - margin30)
        assert upper30 == pytest.approx(50.0 + margin30)

        stats.add(50.0)
        values31 = values + [50.0]
        lower31, upper31 = stats.confidence_interval_95()

        margin31 = 1.96 * statistics.stdev(values31) / math.sqrt(31)
        assert lower31 == pytest.approx(50.0 - margin31)
        assert upper31 == pytest.approx(50.0 + margin31)
        assert (upper30 - lower30) - (upper31 - lower31) > 1.0

    def test_t_table_values(self):
        assert len(T_CRITICAL_95) == 29
        assert t_critical_95(1) == 12.706
        assert t_critical_95(10) == 2.228
        assert t_critical_95(29) == 2.045

    def test_t_table_rejects_out_of_range_df(self):
        with pytest.raises(AssertionError):
            t_critical_95(30)
        with pytest.raises(AssertionError):
            t_critical_95(0)


class TestReport:
    def test_report_format(self):
        report = _filled([1, 2, 3, 4, 5]).report()
        lines = report.split("\n")
        assert lines[0] == "Waiting Time (Event-based)"
        assert lines[1] == "  Count: 5"
        assert lines[2] == "  Average: 3.0000"
        assert lines[3] == "  Std Dev: 1.5811"
        assert lines[4] == "  Min: 1.0000"
        assert lines[5] == "  Max: 5.0000"
        assert lines[6].startswith("  95% CI: [")
        assert len(lines) == 7

    def test_report_ci_matches_interval(self):
        stats = _filled([1, 2, 3, 4, 5])
        lower, upper = stats.confidence_interval_95()
        assert stats.report().endswith(f"  95% CI: [{lower:.4f}, {upper:.4f}]")

    def test_report_marks_ci_not_applicable(self):
        report = _filled([2.0]).report()
        assert report.endswith("  95% CI: N/A (need >= 2 observations)")
        assert not report.endswith("\n")
