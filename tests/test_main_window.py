"""Tests for MainWindow rendering of monitor state."""

from datetime import datetime, timedelta

import pytest
from PySide6.QtCore import QCoreApplication

from linkwatch.fake_prober import FakeProber
from linkwatch.models import Sample
from linkwatch.monitor import ConnectivityMonitor
from linkwatch.ui.main_window import MainWindow

T0 = datetime(2024, 5, 1, 12, 0, 0)


class ClosingFakeProber(FakeProber):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def window(qapp):
    """Create MainWindow instance for each test."""
    monitor = ConnectivityMonitor(FakeProber(seed=1))
    win = MainWindow(monitor)
    yield win
    # Cleanup
    win.close()
    win.deleteLater()
    QCoreApplication.processEvents()


class TestMainWindow:
    def test_title(self, window):
        assert window.windowTitle() == "Internet Connection Monitor"

    def test_initial_statistics(self, window):
        assert window.uptime_label.text() == "Uptime: 0.00%"
        assert window.downtime_label.text() == "Downtime: 0.00%"
        assert window.latency_label.text() == "Average Latency: 0.00 ms"
        assert window.sample_model.rowCount() == 0

    def test_renders_monitor_updates(self, window):
        window.monitor.append(Sample.connected_at(T0, 100.0))
        window.monitor.append(Sample.connected_at(T0 + timedelta(seconds=5), 200.0))
        window.monitor.append(Sample.disconnected_at(T0 + timedelta(seconds=10)))

        assert window.uptime_label.text() == "Uptime: 66.67%"
        assert window.downtime_label.text() == "Downtime: 33.33%"
        assert window.latency_label.text() == "Average Latency: 150.00 ms"
        assert window.sample_model.rowCount() == 3
        assert list(window.status_curve.getData()[1]) == [1, 1, 0]
        assert list(window.latency_curve.getData()[1]) == [100.0, 200.0, 0.0]
        assert window.status_label.text() == "Status: Disconnected"

    def test_start_stop_buttons(self, window):
        window.start_monitoring()
        assert window.monitor.is_monitoring
        assert not window.start_button.isEnabled()
        assert window.stop_button.isEnabled()

        window.stop_monitoring()
        assert not window.monitor.is_monitoring
        assert window.start_button.isEnabled()
        assert not window.stop_button.isEnabled()

    def test_close_stops_monitor(self, window):
        window.show()
        window.start_monitoring()

        window.close()

        assert not window.monitor.is_monitoring
        assert not window.monitor.timer.isActive()

    def test_error_shown_in_status(self, window):
        window.monitor.error.emit("boom")

        assert window.status_label.text() == "Status: Probe error - boom"

    def test_close_releases_prober(self, qapp):
        prober = ClosingFakeProber(seed=2)
        win = MainWindow(ConnectivityMonitor(prober))
        win.show()
        win.start_monitoring()

        win.close()

        assert prober.closed
        assert not win.monitor.in_flight
        win.deleteLater()
        QCoreApplication.processEvents()
