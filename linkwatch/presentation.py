"""Display-ready views of the sample log and statistics."""

from dataclasses import dataclass
from typing import Sequence

from linkwatch.constants import TIME_LABEL_FORMAT
from linkwatch.models import Sample, Statistics


@dataclass(frozen=True)
class ChartSeries:
    """Parallel series for charting, one entry per sample.

    labels are local wall-clock strings for consumers that key by category;
    the pyqtgraph charts plot against timestamps and format their own axis.
    """

    labels: tuple[str, ...]
    timestamps: tuple[float, ...]  # POSIX seconds, for time axes
    status: tuple[int, ...]  # 1 connected, 0 disconnected
    latency: tuple[float, ...]


def build_series(samples: Sequence[Sample]) -> ChartSeries:
    """Split samples into connectivity and latency series keyed by time labels."""
    return ChartSeries(
        labels=tuple(s.ts.astimezone().strftime(TIME_LABEL_FORMAT) for s in samples),
        timestamps=tuple(s.ts.timestamp() for s in samples),
        status=tuple(1 if s.connected else 0 for s in samples),
        latency=tuple(s.latency_ms for s in samples),
    )


def format_statistics(stats: Statistics) -> dict[str, str]:
    """Format statistics with two decimals and their unit.

    Examples:
        >>> format_statistics(Statistics(50.0, 50.0, 42.5))["avg_latency"]
        '42.50 ms'
    """
    return {
        "uptime": f"{stats.uptime_pct:.2f}%",
        "downtime": f"{stats.downtime_pct:.2f}%",
        "avg_latency": f"{stats.avg_latency_ms:.2f} ms",
    }
