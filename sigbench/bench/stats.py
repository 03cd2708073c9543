"""Summary statistics over a series of per-round durations.

Per-operation latencies are right-skewed, so the central tendency reported
next to the median is the geometric mean rather than the arithmetic mean.
"""

import math
import statistics
from collections.abc import Sequence

from sigbench.errors import StatisticsError
from sigbench.models.benchmark_models import BenchmarkSummary
from sigbench.models.constants import NANOS_PER_SECOND


def _require_values(series: Sequence[int], what: str) -> None:
    if not series:
        raise StatisticsError(f"{what} of an empty result series is undefined")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def median(series: Sequence[int]) -> float:
    """Middle value of the sorted series; mean of the middle two for even lengths.

    Raises:
        StatisticsError: If series is empty.
    """
    _require_values(series, "median")
    return float(statistics.median(series))


def geometric_mean(series: Sequence[int]) -> float:
    """exp(mean(log(x))) over the series.

    Raises:
        StatisticsError: If series is empty or holds a non-positive duration.
    """
    _require_values(series, "geometric mean")
    smallest = min(series)
    if smallest <= 0:
        raise StatisticsError(
            f"geometric mean requires positive durations, found {smallest} ns"
        )
    return statistics.geometric_mean(series)


def standard_deviation(series: Sequence[int]) -> float:
    """Population standard deviation of the series.

    Raises:
        StatisticsError: If series is empty.
    """
    _require_values(series, "standard deviation")
    return statistics.pstdev(series)


def ops_per_second(duration_ns: int) -> int:
    """Operations per second for a per-operation duration in nanoseconds.

    Raises:
        StatisticsError: If duration_ns is not positive.
    """
    if duration_ns <= 0:
        raise StatisticsError(
            f"throughput requires a positive duration, got {duration_ns} ns"
        )
    return round_half_up(NANOS_PER_SECOND / duration_ns)


def summarize(series: Sequence[int]) -> BenchmarkSummary:
    """Reduce the measured series to the reported summary.

    Median, geometric mean and standard deviation are each computed over the
    full series and rounded to whole nanoseconds; throughput is derived from
    the rounded central values.

    Raises:
        StatisticsError: If series is empty or holds a non-positive duration.
    """
    median_ns = round_half_up(median(series))
    mean_ns = round_half_up(geometric_mean(series))
    stddev_ns = round_half_up(standard_deviation(series))

    return BenchmarkSummary(
        rounds=len(series),
        median_ns=median_ns,
        mean_ns=mean_ns,
        stddev_ns=stddev_ns,
        median_ops_per_sec=ops_per_second(median_ns),
        mean_ops_per_sec=ops_per_second(mean_ns),
    )
