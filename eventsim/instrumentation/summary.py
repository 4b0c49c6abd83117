"""Run summary returned by Simulator.run().

RunSummary records what a single ``run()`` call did: the simulated span it
covered, how many events executed or were skipped as cancelled, and whether
it stopped at the time limit.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class RunSummary:
    """Outcome of one Simulator.run() call."""
    start_time: float
    end_time: float
    events_processed: int
    events_cancelled: int
    stopped_at_limit: bool
    wall_clock_seconds: float

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    def __str__(self) -> str:
        lines = [
            "Run Summary",
            f"  Simulated: {self.start_time:.2f} -> {self.end_time:.2f} ({self.wall_clock_seconds:.3f}s wall)",
            f"  Events processed: {self.events_processed}",
            f"  Events cancelled: {self.events_cancelled}",
        ]
        if self.stopped_at_limit:
            lines.append("  Stopped at time limit")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
