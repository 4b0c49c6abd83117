"""Name-keyed registry of event-based and time-weighted statistics.

StatsCollector creates accumulators lazily on first write. Event-based and
time-weighted metrics live in separate namespaces: the same name may exist in
both, and the two entries are unrelated.
"""

from __future__ import annotations

import logging
import math

import pandas as pd

from eventsim.stats.event_stats import EventStats
from eventsim.stats.time_weighted_stats import TimeWeightedStats

logger = logging.getLogger(__name__)

REPORT_BANNER = "=== Statistics Report ==="


class StatsCollector:
    """Routes named observations to the right accumulator.

    Example:
        stats = StatsCollector()
        stats.add_event("Waiting Time", 1.7)
        stats.add_time_weighted("Queue Length", sim.now(), 3)
        print(stats.report(end_time=sim.now()))
    """

    def __init__(self) -> None:
        self._event_stats: dict[str, EventStats] = {}
        self._time_weighted_stats: dict[str, TimeWeightedStats] = {}

    def add_event(self, name: str, value: float) -> None:
        """Record an observation for event-based metric ``name``."""
        stats = self._event_stats.get(name)
        if stats is None:
            logger.debug("Creating event-based metric %r", name)
            stats = self._event_stats[name] = EventStats(name)
        stats.add(value)

    def add_time_weighted(self, name: str, time: float, value: float) -> None:
        """Update time-weighted metric ``name`` to ``value`` at ``time``.

        Raises:
            ValueError: If ``time`` precedes the metric's last update.
        """
        stats = self._time_weighted_stats.get(name)
        if stats is None:
            logger.debug("Creating time-weighted metric %r", name)
            stats = self._time_weighted_stats[name] = TimeWeightedStats(name)
        stats.update(time, value)

    def get_event(self, name: str) -> EventStats | None:
        return self._event_stats.get(name)

    def get_time_weighted(self, name: str) -> TimeWeightedStats | None:
        return self._time_weighted_stats.get(name)

    def has_event(self, name: str) -> bool:
        return name in self._event_stats

    def has_time_weighted(self, name: str) -> bool:
        return name in self._time_weighted_stats

    def event_names(self) -> list[str]:
        return list(self._event_stats)

    def time_weighted_names(self) -> list[str]:
        return list(self._time_weighted_stats)

    def report(self, end_time: float) -> str:
        """Banner line followed by every metric block, blank-line separated.

        Event-based blocks come first, then time-weighted ones evaluated at
        ``end_time``.
        """
        blocks = [stats.report() for stats in self._event_stats.values()]
        blocks.extend(stats.report(end_time) for stats in self._time_weighted_stats.values())
        return REPORT_BANNER + "\n" + "\n\n".join(blocks)

    def to_dataframe(self, end_time: float) -> pd.DataFrame:
        """One row per metric, for analysis outside the text report.

        Columns that do not apply to a metric kind (std and CI for
        time-weighted metrics, CI for fewer than 2 observations) are NaN.
        """
        rows = []
        for stats in self._event_stats.values():
            ci_lower, ci_upper = math.nan, math.nan
            if stats.count() >= 2:
                ci_lower, ci_upper = stats.confidence_interval_95()
            rows.append({
                "name": stats.name,
                "kind": "event",
                "count": stats.count(),
                "mean": stats.mean(),
                "std": stats.standard_deviation(),
                "min": stats.min(),
                "max": stats.max(),
                "ci_lower": ci_lower,
                "ci_upper": ci_upper,
            })
        for stats in self._time_weighted_stats.values():
            rows.append({
                "name": stats.name,
                "kind": "time_weighted",
                "count": stats.count(),
                "mean": stats.average(end_time),
                "std": math.nan,
                "min": stats.min(),
                "max": stats.max(),
                "ci_lower": math.nan,
                "ci_upper": math.nan,
            })
        return pd.DataFrame(
            rows,
            columns=["name", "kind", "count", "mean", "std", "min", "max", "ci_lower", "ci_upper"],
        )
