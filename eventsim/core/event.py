"""Event types that form the units of simulation work.

An event carries a relative ``delay``. When handed to ``Simulator.schedule``
it is stamped with an absolute ``time`` (``now + delay``) and queued. When the
simulator reaches that time it calls ``action(simulator)``, which may read or
mutate application state, record statistics, and schedule further events.

Cancellation is lazy: ``cancel()`` only raises a flag. The entry stays in the
queue and the simulator skips it when it is popped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from eventsim.core.simulator import Simulator


class Event(ABC):
    """Base class for schedulable work.

    Subclasses implement ``action()`` and may override ``label()`` for
    readable event logs.

    Attributes:
        delay: Offset from the scheduling instant to execution.
        time: Absolute execution time, assigned once by the simulator.
    """

    __slots__ = ("_cancelled", "_time", "delay")

    def __init__(self, delay: float):
        self.delay = delay
        self._time: float | None = None
        self._cancelled = False

    @property
    def time(self) -> float | None:
        """Absolute scheduled time, or None if never scheduled."""
        return self._time

    def _assign_time(self, time: float) -> None:
        if self._time is not None:
            raise RuntimeError(f"{self.label()} has already been scheduled at t={self._time}")
        self._time = time

    @property
    def cancelled(self) -> bool:
        """Whether this event has been cancelled."""
        return self._cancelled

    def cancel(self) -> None:
        """Mark this event so its action never runs.

        Cancelling twice, or after execution, is a no-op.
        """
        self._cancelled = True

    @abstractmethod
    def action(self, sim: Simulator) -> None:
        """Execute the event at its scheduled time."""

    def label(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{type(self).__name__}(delay={self.delay!r}, time={self._time!r}, cancelled={self._cancelled})"


class CallbackEvent(Event):
    """Event whose action is a plain function.

    Use this to schedule a one-off callback without writing an Event subclass:

        sim.schedule(CallbackEvent(5.0, lambda sim: print(sim.now())))

    Args:
        delay: Offset from the scheduling instant to execution.
        fn: Called with the simulator when the event fires.
        label: Name shown in event logs. Defaults to the function name.
    """

    __slots__ = ("_fn", "_label")

    def __init__(self, delay: float, fn: Callable[[Simulator], Any], label: str | None = None):
        super().__init__(delay)
        self._fn = fn
        self._label = label or getattr(fn, "__name__", "callback")

    def action(self, sim: Simulator) -> None:
        self._fn(sim)

    def label(self) -> str:
        return self._label
