"""Entry point for LinkWatch application."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from linkwatch.constants import RETENTION_SAMPLES
from linkwatch.fake_prober import FakeProber
from linkwatch.logging_config import configure_logging
from linkwatch.monitor import ConnectivityMonitor
from linkwatch.prober_http import HttpProber
from linkwatch.sample_log import SampleLog
from linkwatch.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_prober():
    """Select the prober, honouring LINKWATCH_PROBER=fake."""
    if os.environ.get("LINKWATCH_PROBER", "").lower() == "fake":
        logger.info("Using FakeProber (LINKWATCH_PROBER=fake)")
        return FakeProber()

    prober = HttpProber()
    logger.info("Using HttpProber: url=%s", prober.url)
    return prober


def main():
    """Main entry point for the LinkWatch application."""
    configure_logging()

    app = QApplication(sys.argv)

    monitor = ConnectivityMonitor(create_prober(), SampleLog(capacity=RETENTION_SAMPLES))

    window = MainWindow(monitor)
    window.show()
    window.start_monitoring()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
