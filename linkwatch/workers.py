"""Worker classes for background probe tasks."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from linkwatch.prober import Prober

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """Signals for communicating between worker threads and main thread."""

    sample_ready = Signal(object, int)  # Emits (Sample, generation_id)
    error = Signal(str, int)  # Emits (error message, generation_id)
    finished = Signal(int)  # Emits generation_id when worker completes


class ProbeWorker(QRunnable):
    """Worker that executes prober.probe() in a background thread."""

    def __init__(self, prober: Prober, generation_id: int):
        super().__init__()
        self.prober = prober
        self.generation_id = generation_id
        self.signals = WorkerSignals()

    def run(self):
        """Execute the probe in background thread."""
        try:
            logger.debug("Worker starting: generation_id=%d", self.generation_id)

            # May block for up to the prober's timeout
            sample = self.prober.probe()

            self.signals.sample_ready.emit(sample, self.generation_id)

            logger.debug(
                "Worker completed: generation_id=%d, status=%s",
                self.generation_id,
                sample.status.value,
            )

        except Exception as e:
            logger.exception(
                "Worker exception: generation_id=%d, error=%s",
                self.generation_id,
                str(e),
            )
            self.signals.error.emit(str(e), self.generation_id)

        finally:
            self.signals.finished.emit(self.generation_id)
