"""Time-weighted statistics for piecewise-constant signals."""

from __future__ import annotations


class TimeWeightedStats:
    """Running integral of a value that holds between updates.

    Use this for state such as queue length or number of busy servers. The
    value set at ``update(t, v)`` is in effect until the next update, so the
    average weights each value by how long it persisted.

    The signal starts at value 0 at time 0, and that initial point counts as
    the first update. ``min()`` and ``max()`` therefore always include 0.

    Args:
        name: Label used in reports.
    """

    def __init__(self, name: str):
        self.name = name
        self._last_time = 0.0
        self._last_value = 0.0
        self._integral = 0.0
        self._min = 0.0
        self._max = 0.0
        self._update_count = 1

    def update(self, time: float, value: float) -> None:
        """Set the signal to ``value`` from ``time`` onward.

        An update at the current last time is allowed; it adds nothing to the
        integral and replaces the value for later intervals.

        Raises:
            ValueError: If ``time`` is earlier than the last update. Nothing
                is modified in that case.
        """
        if time < self._last_time:
            raise ValueError(
                f"{self.name}: update time {time} is before last update time {self._last_time}"
            )

        self._integral += self._last_value * (time - self._last_time)
        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._last_time = time
        self._last_value = value
        self._update_count += 1

    def count(self) -> int:
        """Number of updates, including the implicit one at time 0."""
        return self._update_count

    def average(self, end_time: float) -> float:
        """Time-weighted average over [0, end_time].

        The last value is charged up to ``end_time``. Returns 0.0 when
        ``end_time`` is not positive.

        Raises:
            ValueError: If ``end_time`` is earlier than the last update.
        """
        if end_time < self._last_time:
            raise ValueError(
                f"{self.name}: end time {end_time} is before last update time {self._last_time}"
            )
        if end_time <= 0.0:
            return 0.0
        total = self._integral + self._last_value * (end_time - self._last_time)
        return total / end_time

    def min(self) -> float:
        return self._min

    def max(self) -> float:
        return self._max

    @property
    def integral(self) -> float:
        """Accumulated integral up to the last update (excludes the open tail)."""
        return self._integral

    @property
    def last_value(self) -> float:
        return self._last_value

    @property
    def last_time(self) -> float:
        return self._last_time

    def report(self, end_time: float) -> str:
        return "\n".join([
            f"{self.name} (Time-Weighted)",
            f"  Updates: {self.count()}",
            f"  Average: {self.average(end_time):.4f}",
            f"  Min: {self.min():.4f}",
            f"  Max: {self.max():.4f}",
        ])

    def __repr__(self) -> str:
        return f"TimeWeightedStats(name={self.name!r}, last_time={self._last_time}, last_value={self._last_value})"
