"""Discrete event simulator.

The Simulator owns simulated time and a heap of pending events. ``run()``
pops entries in (time, scheduling order) and executes them one at a time, so
an action always runs to completion before the next entry is considered.
"""

from __future__ import annotations

import logging
import time as _wallclock

from eventsim.core.event import Event
from eventsim.core.event_heap import EventHeap
from eventsim.instrumentation.summary import RunSummary

logger = logging.getLogger(__name__)


class Simulator:
    """Advance simulated time by executing scheduled events in order.

    Args:
        log_events: If True, log every executed event at INFO level as
            ``t=<time> | <label>``. Otherwise executed events are logged at
            DEBUG only.
    """

    def __init__(self, log_events: bool = False):
        self._time = 0.0
        self._log_events = log_events
        self._event_heap = EventHeap()

    def now(self) -> float:
        """Current simulated time."""
        return self._time

    @property
    def pending(self) -> int:
        """Entries still queued, including cancelled ones not yet popped."""
        return self._event_heap.size()

    def schedule(self, event: Event) -> None:
        """Queue ``event`` to run at ``now() + event.delay``.

        Among events with the same time, those scheduled earlier run first.
        A negative delay is accepted and logged as a warning.

        Raises:
            RuntimeError: If ``event`` was already scheduled. An event's
                scheduled time is assigned once and never changes.
        """
        if event.delay < 0:
            logger.warning(
                "Scheduling %s with negative delay %s at t=%s", event.label(), event.delay, self._time
            )
        event._assign_time(self._time + event.delay)
        self._event_heap.push(event.time, event)

    def run(self, until: float | None = None) -> RunSummary:
        """Execute events until the queue is empty or ``until`` is passed.

        When the next entry lies beyond ``until``, time is set to exactly
        ``until`` and the run stops. That entry has already been popped and
        is dropped, not re-queued.

        Args:
            until: Time limit. None (or a negative value) means unlimited.

        Returns:
            A RunSummary for this call.
        """
        if until is not None and until < 0:
            until = None

        start_time = self._time
        wall_start = _wallclock.perf_counter()
        processed = 0
        cancelled = 0
        stopped_at_limit = False

        logger.info("Run started at t=%s (until=%s, %d pending)", self._time, until, self.pending)

        while self._event_heap.has_events():
            entry = self._event_heap.pop()
            event = entry.event

            if until is not None and entry.time > until:
                logger.debug("Dropping %s at t=%s beyond limit %s", event.label(), entry.time, until)
                self._time = until
                stopped_at_limit = True
                break

            if event.cancelled:
                cancelled += 1
                logger.debug("Skipping cancelled %s at t=%s", event.label(), entry.time)
                continue

            self._time = entry.time

            if self._log_events:
                logger.info("t=%6.1f | %s", self._time, event.label())
            else:
                logger.debug("t=%s | %s", self._time, event.label())

            event.action(self)
            processed += 1

        summary = RunSummary(
            start_time=start_time,
            end_time=self._time,
            events_processed=processed,
            events_cancelled=cancelled,
            stopped_at_limit=stopped_at_limit,
            wall_clock_seconds=_wallclock.perf_counter() - wall_start,
        )
        logger.info(
            "Run finished at t=%s: %d processed, %d cancelled",
            self._time,
            processed,
            cancelled,
        )
        return summary
