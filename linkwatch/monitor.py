"""Connectivity monitor: timer-driven probing into a sample log."""

import dataclasses
import logging

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal

from linkwatch.constants import MONITOR_INTERVAL_MS
from linkwatch.models import Sample, Statistics
from linkwatch.prober import Prober
from linkwatch.sample_log import SampleLog
from linkwatch.workers import ProbeWorker

logger = logging.getLogger(__name__)


class ConnectivityMonitor(QObject):
    """Probes the target on a fixed interval and records every outcome.

    Key features:
    - One recurring timer, acquired by start() and released by stop()
    - At most one probe in flight; a tick that fires while the previous
      probe is still running is skipped
    - Probes run on the thread pool, results come back as queued signals so
      the log is only ever written from the thread that owns the monitor
    - Results from probes started before stop() are discarded

    Thread-safe: All state access on Qt main thread via signals/slots.
    """

    # Signals
    updated = Signal(object, object)  # (tuple[Sample, ...], Statistics)
    error = Signal(str)  # error message from a misbehaving prober

    def __init__(
        self,
        prober: Prober,
        sample_log: SampleLog | None = None,
        interval_ms: int = MONITOR_INTERVAL_MS,
        parent=None,
    ):
        """Initialize connectivity monitor.

        Args:
            prober: Prober used for every tick
            sample_log: Log to record into (default: new unbounded log)
            interval_ms: Probe interval in milliseconds
            parent: Qt parent object
        """
        super().__init__(parent)

        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

        self.prober = prober
        self.interval_ms = interval_ms
        self.log = sample_log if sample_log is not None else SampleLog()

        # In-flight tracking
        self._in_flight = False
        self._current_worker = None  # Keeps worker signals alive until finished

        # Generation ID for invalidating late results
        self._generation_id = 0

        # Threading
        self.thread_pool = QThreadPool.globalInstance()

        # Timer for periodic probing
        self.timer = QTimer(self)
        self.timer.timeout.connect(self._on_tick)

        # Monitoring state
        self.is_monitoring = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def generation_id(self) -> int:
        return self._generation_id

    def start(self):
        """Start probing. Does nothing if already running."""
        if self.is_monitoring:
            return

        self.is_monitoring = True
        self.timer.start(self.interval_ms)
        logger.info("Monitoring started: interval=%dms", self.interval_ms)

    def stop(self):
        """Stop probing and invalidate any probe still in flight."""
        if not self.is_monitoring:
            return

        self.is_monitoring = False
        self.timer.stop()
        self._generation_id += 1
        logger.info(
            "Monitoring stopped (generation_id=%d, samples=%d)",
            self._generation_id,
            len(self.log),
        )

    def shutdown(self):
        """Stop probing for good and release the prober.

        A probe still in flight is detached: its signals are disconnected so
        nothing reaches the monitor once it has been torn down.
        """
        self.stop()

        if self._current_worker is not None:
            signals = self._current_worker.signals
            try:
                signals.sample_ready.disconnect()
                signals.error.disconnect()
                signals.finished.disconnect()
            except RuntimeError:
                pass  # Already disconnected
            self._current_worker = None
            self._in_flight = False

        self.prober.close()
        logger.info("Monitor shut down")

    def append(self, sample: Sample) -> Statistics:
        """Record a sample, refresh statistics and notify listeners."""
        stats = self.log.append(sample)
        self.updated.emit(self.log.samples(), stats)
        return stats

    def get_log(self) -> tuple[Sample, ...]:
        """Snapshot of the recorded samples, oldest first."""
        return self.log.samples()

    def get_stats(self) -> Statistics:
        """Statistics for the recorded samples."""
        return self.log.statistics()

    def _on_tick(self):
        """Handle timer tick - launch a probe unless one is running."""
        if not self.is_monitoring:
            return

        if self._in_flight:
            logger.debug("Tick skipped: probe still in flight")
            return

        self._in_flight = True

        worker = ProbeWorker(self.prober, self._generation_id)
        worker.signals.sample_ready.connect(self._on_sample_ready)
        worker.signals.error.connect(self._on_sample_error)
        worker.signals.finished.connect(self._on_worker_finished)
        self._current_worker = worker

        self.thread_pool.start(worker)

    def _is_stale(self, generation_id: int) -> bool:
        return generation_id != self._generation_id or not self.is_monitoring

    def _on_sample_ready(self, sample: Sample, generation_id: int):
        """Handle sample from worker."""
        if self._is_stale(generation_id):
            logger.debug(
                "Discarding late sample: generation_id=%d (current=%d)",
                generation_id,
                self._generation_id,
            )
            return

        samples = self.log.samples()
        if samples and sample.ts < samples[-1].ts:
            # Wall clock stepped back (NTP correction); keep the log monotonic
            logger.warning(
                "Clock went backwards: sample at %s precedes %s, clamping",
                sample.ts.isoformat(),
                samples[-1].ts.isoformat(),
            )
            sample = dataclasses.replace(sample, ts=samples[-1].ts)

        self.append(sample)

    def _on_sample_error(self, error_msg: str, generation_id: int):
        """Handle unexpected prober failure from worker."""
        logger.error("Probe error: %s", error_msg)
        if not self._is_stale(generation_id):
            self.error.emit(error_msg)

    def _on_worker_finished(self, generation_id: int):
        """Handle worker completion - clear in-flight flag."""
        self._in_flight = False
        self._current_worker = None
        logger.debug("Worker finished: generation_id=%d", generation_id)
