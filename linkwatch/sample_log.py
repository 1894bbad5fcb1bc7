"""Append-only sample history and the statistics derived from it."""

import logging
from collections import deque
from typing import Iterable

from linkwatch.models import Sample, Statistics

logger = logging.getLogger(__name__)


def compute_statistics(samples: Iterable[Sample]) -> Statistics:
    """Compute statistics with a full scan of the given samples (pure function).

    Args:
        samples: Samples in any order

    Returns:
        Statistics with all fields 0.0 for an empty input

    Examples:
        >>> compute_statistics([])
        Statistics(uptime_pct=0.0, downtime_pct=0.0, avg_latency_ms=0.0)
    """
    up_count = 0
    down_count = 0
    total_latency = 0.0

    for sample in samples:
        if sample.connected:
            up_count += 1
            total_latency += sample.latency_ms
        else:
            down_count += 1

    return _statistics_from_totals(up_count, down_count, total_latency)


def _statistics_from_totals(up_count: int, down_count: int, total_latency: float) -> Statistics:
    total = up_count + down_count
    if total == 0:
        return Statistics()

    return Statistics(
        uptime_pct=up_count / total * 100,
        downtime_pct=down_count / total * 100,
        avg_latency_ms=total_latency / up_count if up_count > 0 else 0.0,
    )


class SampleLog:
    """Chronologically ordered history of probe samples.

    Samples are only ever appended, in non-decreasing timestamp order, and are
    never modified afterwards. Readers get immutable snapshots: after every
    append a new tuple and a new Statistics object are swapped in, so a reader
    never sees a half-applied update.

    Retention:
    - capacity=None keeps every sample and recomputes statistics with a full
      scan on each append.
    - capacity=N keeps the newest N samples (oldest evicted first) and keeps
      running totals so statistics are updated in constant time.
    """

    def __init__(self, capacity: int | None = None):
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive")

        self._capacity = capacity
        self._samples = deque()  # No maxlen - eviction is tracked manually

        # Running totals, only maintained for bounded logs
        self._up_count = 0
        self._down_count = 0
        self._total_latency = 0.0

        self._snapshot: tuple[Sample, ...] = ()
        self._stats = Statistics()

    @property
    def capacity(self) -> int | None:
        return self._capacity

    def __len__(self) -> int:
        return len(self._snapshot)

    def append(self, sample: Sample) -> Statistics:
        """Append a sample and refresh statistics.

        Args:
            sample: Sample to append; its timestamp must not precede the last one

        Returns:
            The statistics after the append

        Raises:
            ValueError: If the sample is older than the newest logged sample
        """
        if self._samples and sample.ts < self._samples[-1].ts:
            raise ValueError(
                f"sample at {sample.ts.isoformat()} is older than "
                f"last sample at {self._samples[-1].ts.isoformat()}"
            )

        self._samples.append(sample)

        if self._capacity is None:
            stats = compute_statistics(self._samples)
        else:
            self._add_to_totals(sample)
            while len(self._samples) > self._capacity:
                evicted = self._samples.popleft()
                self._remove_from_totals(evicted)
            stats = _statistics_from_totals(
                self._up_count, self._down_count, self._total_latency
            )

        # Publish
        self._snapshot = tuple(self._samples)
        self._stats = stats

        logger.debug(
            "Sample appended: status=%s, latency=%.2fms, size=%d",
            sample.status.value,
            sample.latency_ms,
            len(self._snapshot),
        )
        return stats

    def samples(self) -> tuple[Sample, ...]:
        """Return the current samples, oldest first."""
        return self._snapshot

    def statistics(self) -> Statistics:
        """Return statistics for the current samples."""
        return self._stats

    def _add_to_totals(self, sample: Sample):
        if sample.connected:
            self._up_count += 1
            self._total_latency += sample.latency_ms
        else:
            self._down_count += 1

    def _remove_from_totals(self, sample: Sample):
        if sample.connected:
            self._up_count -= 1
            self._total_latency -= sample.latency_ms
            if self._up_count == 0:
                # Drop accumulated float error once no latency remains
                self._total_latency = 0.0
        else:
            self._down_count -= 1
