"""eventsim: a deterministic discrete-event simulation core.

Schedule Event objects on a Simulator, record observations into a
StatsCollector from their actions, and print a report at the end:

    sim = Simulator()
    stats = StatsCollector()
    sim.schedule(CallbackEvent(2.0, lambda s: stats.add_event("Delay", s.now())))
    sim.run(until=100.0)
    print(stats.report(end_time=sim.now()))
"""

import logging

# Library stays silent until the application opts in.
logging.getLogger("eventsim").addHandler(logging.NullHandler())

from eventsim.core import CallbackEvent, Event, EventHeap, Simulator
from eventsim.instrumentation import RunSummary
from eventsim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)
from eventsim.stats import EventStats, StatsCollector, TimeWeightedStats

__version__ = "0.1.0"

__all__ = [
    "CallbackEvent",
    "Event",
    "EventHeap",
    "EventStats",
    "RunSummary",
    "Simulator",
    "StatsCollector",
    "TimeWeightedStats",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]
