"""Statistics accumulators and the named-metric registry."""

from eventsim.stats.event_stats import EventStats
from eventsim.stats.stats_collector import StatsCollector
from eventsim.stats.time_weighted_stats import TimeWeightedStats

__all__ = [
    "EventStats",
    "StatsCollector",
    "TimeWeightedStats",
]
