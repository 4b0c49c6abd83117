import heapq
from dataclasses import dataclass, field
from itertools import count

from eventsim.core.event import Event


@dataclass(order=True, slots=True)
class ScheduledEntry:
    """Heap entry ordered by (time, seq).

    ``seq`` comes from a per-heap counter, so among equal times the entry
    pushed first is popped first.
    """

    time: float
    seq: int
    event: Event = field(compare=False)


class EventHeap:
    def __init__(self):
        """Min-heap of scheduled events with FIFO tie-breaking.

        Events are wrapped in ScheduledEntry so ordering never depends on the
        Event objects themselves being comparable.
        """
        self._heap: list[ScheduledEntry] = []
        self._seq = count()

    def push(self, time: float, event: Event) -> ScheduledEntry:
        entry = ScheduledEntry(time, next(self._seq), event)
        heapq.heappush(self._heap, entry)
        return entry

    def pop(self) -> ScheduledEntry:
        return heapq.heappop(self._heap)

    def peek(self) -> ScheduledEntry:
        return self._heap[0]

    def has_events(self) -> bool:
        return bool(self._heap)

    def size(self) -> int:
        return len(self._heap)
