"""Statistics over discrete observations.

EventStats keeps every observation (e.g. one waiting time per served
customer) and recomputes summaries on demand from the stored values.
"""

from __future__ import annotations

import math

# Two-tailed 95% Student's t critical values, df = 1..29.
T_CRITICAL_95 = (
    12.706, 4.303, 3.182, 2.776, 2.571,
    2.447, 2.365, 2.306, 2.262, 2.228,
    2.201, 2.179, 2.160, 2.145, 2.131,
    2.120, 2.110, 2.101, 2.093, 2.086,
    2.080, 2.074, 2.069, 2.064, 2.060,
    2.056, 2.052, 2.048, 2.045,
)

Z_CRITICAL_95 = 1.96

# Largest sample size that still uses the t table.
T_TABLE_MAX_N = 30


def t_critical_95(df: int) -> float:
    """Two-tailed 95% t critical value for ``df`` degrees of freedom."""
    assert 0 < df <= len(T_CRITICAL_95), f"df={df} outside t table"
    return T_CRITICAL_95[df - 1]


class EventStats:
    """Collects observations recorded at events and summarizes them.

    Use this for values sampled at discrete instants (waiting times, service
    times). Empty collections report 0 for mean, min and max rather than
    raising.

    Args:
        name: Label used in reports.
    """

    def __init__(self, name: str):
        self.name = name
        self._observations: list[float] = []

    def add(self, value: float) -> None:
        """Record one observation."""
        self._observations.append(value)

    @property
    def observations(self) -> tuple[float, ...]:
        """All observations in insertion order."""
        return tuple(self._observations)

    def count(self) -> int:
        return len(self._observations)

    def mean(self) -> float:
        """Arithmetic mean. Returns 0.0 if empty."""
        if not self._observations:
            return 0.0
        return math.fsum(self._observations) / len(self._observations)

    def standard_deviation(self) -> float:
        """Sample standard deviation (divisor n - 1). Returns 0.0 if n < 2."""
        n = len(self._observations)
        if n < 2:
            return 0.0
        avg = self.mean()
        squares = math.fsum((x - avg) * (x - avg) for x in self._observations)
        return math.sqrt(squares / (n - 1))

    def min(self) -> float:
        """Smallest observation. Returns 0.0 if empty."""
        if not self._observations:
            return 0.0
        return min(self._observations)

    def max(self) -> float:
        """Largest observation. Returns 0.0 if empty."""
        if not self._observations:
            return 0.0
        return max(self._observations)

    def confidence_interval_95(self) -> tuple[float, float]:
        """95% confidence interval for the mean.

        Uses z = 1.96 for more than 30 observations and the Student's t
        critical value for n - 1 degrees of freedom otherwise.

        Returns:
            (lower, upper) bounds.

        Raises:
            ValueError: If fewer than 2 observations have been recorded.
        """
        n = len(self._observations)
        if n < 2:
            raise ValueError("Need at least 2 observations to compute confidence interval")

        if n > T_TABLE_MAX_N:
            critical_value = Z_CRITICAL_95
        else:
            critical_value = t_critical_95(n - 1)

        mean = self.mean()
        margin = critical_value * (self.standard_deviation() / math.sqrt(n))
        return mean - margin, mean + margin

    def report(self) -> str:
        lines = [
            f"{self.name} (Event-based)",
            f"  Count: {self.count()}",
            f"  Average: {self.mean():.4f}",
            f"  Std Dev: {self.standard_deviation():.4f}",
            f"  Min: {self.min():.4f}",
            f"  Max: {self.max():.4f}",
        ]
        if self.count() >= 2:
            lower, upper = self.confidence_interval_95()
            lines.append(f"  95% CI: [{lower:.4f}, {upper:.4f}]")
        else:
            lines.append("  95% CI: N/A (need >= 2 observations)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"EventStats(name={self.name!r}, count={self.count()})"
