"""
Benchmark classification.

Fixed reference thresholds per metric.  Tiers are walked best-first in the
metric's direction and the worst tier is the fallback, so every value maps
to exactly one tier.

============== ======= ====== ======= ============ =====================
metric         elite   good   average needs work   direction
============== ======= ====== ======= ============ =====================
run_time (s)   <= 420  <= 450 <= 480  > 480        lower is better
broad_jump cm  >= 260  >= 240 >= 220  < 220        higher is better
sprint reps    >= 32   >= 28  >= 24   < 24         higher is better
jump_balance % >= 95   >= 90  >= 85   < 85         higher is better
fatigue %      >= -5   >= -10 >= -15  < -15        higher is better
============== ======= ====== ======= ============ =====================

An unknown metric name is not an error: it classifies as ``Unknown`` so a
new metric key never breaks rendering.
"""

from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel

from athlete_tracker.schemas.insights import NOT_AVAILABLE, Benchmark

ELITE = "Elite"
GOOD = "Good"
AVERAGE = "Average"
NEEDS_WORK = "Needs Work"
UNKNOWN = "Unknown"

LEVELS = [ELITE, GOOD, AVERAGE, NEEDS_WORK]

LEVEL_COLORS: dict[str, str] = {
    ELITE: "#10b981",
    GOOD: "#3b82f6",
    AVERAGE: "#f59e0b",
    NEEDS_WORK: "#ef4444",
}
NEUTRAL_COLOR = "#6b7280"


class MetricBenchmark(BaseModel):
    """Thresholds of one metric, best tier first."""

    elite: float
    good: float
    average: float
    lower_is_better: bool = False

    @property
    def thresholds(self) -> list[tuple[str, float]]:
        return [(ELITE, self.elite), (GOOD, self.good), (AVERAGE, self.average)]


BENCHMARKS: dict[str, MetricBenchmark] = {
    "run_time": MetricBenchmark(elite=420, good=450, average=480, lower_is_better=True),
    "broad_jump": MetricBenchmark(elite=260, good=240, average=220),
    "sprint": MetricBenchmark(elite=32, good=28, average=24),
    "jump_balance": MetricBenchmark(elite=95, good=90, average=85),
    "fatigue_dropoff": MetricBenchmark(elite=-5, good=-10, average=-15),
}


def _level_for(value: float, benchmark: MetricBenchmark, lower_is_better: bool) -> str:
    for level, threshold in benchmark.thresholds:
        if lower_is_better and value <= threshold:
            return level
        if not lower_is_better and value >= threshold:
            return level
    return NEEDS_WORK


def classify_performance(value: Optional[float], metric: str,
                         lower_is_better: Optional[bool] = None, ) -> Benchmark:
    """Classify *value* against the benchmark table for *metric*.

    Args:
        value: Measured value (``None`` when the metric was never recorded).
        metric: Key of :data:`BENCHMARKS`.
        lower_is_better: Direction override; ``None`` uses the table's.

    Returns:
        :class:`Benchmark` with level and colour.  Never raises.
    """
    benchmark = BENCHMARKS.get(metric)
    if benchmark is None:
        return Benchmark(level=UNKNOWN, color=NEUTRAL_COLOR)
    if value is None:
        return Benchmark(level=NOT_AVAILABLE, color=NEUTRAL_COLOR)

    direction = benchmark.lower_is_better if lower_is_better is None else lower_is_better
    level = _level_for(value, benchmark, direction)
    return Benchmark(level=level, color=LEVEL_COLORS[level])


def tier_points(value: float, metric: str, points: Sequence[int]) -> int:
    """Map the tier of *value* to ``points`` (elite, good, average, needs work).

    Unknown metrics score the last (lowest) entry.
    """
    level = classify_performance(value, metric).level
    if level not in LEVELS:
        return points[-1]
    return points[LEVELS.index(level)]
