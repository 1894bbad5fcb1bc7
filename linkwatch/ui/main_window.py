"""Main window for LinkWatch application."""

import logging

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFrame,
    QGroupBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from linkwatch.constants import LATENCY_COLOR, STATUS_COLOR, TARGET_URL
from linkwatch.monitor import ConnectivityMonitor
from linkwatch.presentation import build_series, format_statistics
from linkwatch.ui.plot_items import make_plot
from linkwatch.ui.sample_model import SampleTableModel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    Renders whatever the monitor publishes; it never writes to the log.
    """

    def __init__(self, monitor: ConnectivityMonitor):
        super().__init__()
        self.setWindowTitle("Internet Connection Monitor")
        self.setGeometry(100, 100, 1100, 750)

        self.monitor = monitor
        self.monitor.updated.connect(self.on_monitor_updated)
        self.monitor.error.connect(self.on_monitor_error)

        self.sample_model = SampleTableModel()

        self.setup_ui()
        self.render(self.monitor.get_log(), self.monitor.get_stats())

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle application close event - release timer, worker and prober."""
        self.monitor.shutdown()

        # Closing the session aborts a pending request; give it a moment
        self.monitor.thread_pool.waitForDone(1000)

        super().closeEvent(event)

    def setup_ui(self):
        """Set up the main user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.addWidget(self.create_control_panel(), 0)
        main_layout.addWidget(self.create_chart_area(), 1)

    def create_control_panel(self):
        """Create the left control panel."""
        panel = QFrame()
        panel.setFrameStyle(QFrame.Box)
        panel.setFixedWidth(260)

        layout = QVBoxLayout(panel)

        title = QLabel("Internet Connection Monitor")
        title.setAlignment(Qt.AlignCenter)
        title.setWordWrap(True)
        title.setStyleSheet("font-weight: bold; font-size: 14px; margin: 10px;")
        layout.addWidget(title)

        target_label = QLabel(f"Target: {TARGET_URL}")
        target_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(target_label)

        # Controls
        controls_group = QGroupBox("Controls")
        controls_layout = QVBoxLayout(controls_group)

        self.start_button = QPushButton("Start Monitoring")
        self.start_button.clicked.connect(self.start_monitoring)
        controls_layout.addWidget(self.start_button)

        self.stop_button = QPushButton("Stop Monitoring")
        self.stop_button.clicked.connect(self.stop_monitoring)
        self.stop_button.setEnabled(False)
        controls_layout.addWidget(self.stop_button)

        layout.addWidget(controls_group)

        # Summary statistics
        stats_group = QGroupBox("Summary Statistics")
        stats_layout = QVBoxLayout(stats_group)

        self.uptime_label = QLabel()
        self.downtime_label = QLabel()
        self.latency_label = QLabel()

        for label in [self.uptime_label, self.downtime_label, self.latency_label]:
            label.setStyleSheet("padding: 5px; font-family: monospace;")
            stats_layout.addWidget(label)

        layout.addWidget(stats_group)

        layout.addStretch()

        self.status_label = QLabel("Status: Ready")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        self.status_label.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.status_label)

        return panel

    def create_chart_area(self):
        """Create the right area with status/latency charts and sample table."""
        area = QFrame()
        area.setFrameStyle(QFrame.Box)

        layout = QVBoxLayout(area)

        self.status_plot = make_plot("Connectivity Status", "")
        self.status_plot.setYRange(-0.1, 1.1, padding=0)
        self.status_plot.getAxis("left").setTicks([[(0, "Disconnected"), (1, "Connected")]])
        self.status_curve = self.status_plot.plot(
            pen=pg.mkPen(STATUS_COLOR, width=2),
            symbol="o",
            symbolSize=5,
            symbolBrush=STATUS_COLOR,
        )
        layout.addWidget(self.status_plot, 1)

        self.latency_plot = make_plot("Latency", "ms")
        self.latency_plot.setXLink(self.status_plot)
        self.latency_curve = self.latency_plot.plot(
            pen=pg.mkPen(LATENCY_COLOR, width=2),
            symbol="o",
            symbolSize=5,
            symbolBrush=LATENCY_COLOR,
        )
        layout.addWidget(self.latency_plot, 2)

        self.table = QTableView()
        self.table.setModel(self.sample_model)
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(QTableView.SelectRows)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(2, QHeaderView.Stretch)
        layout.addWidget(self.table, 1)

        return area

    def start_monitoring(self):
        """Handle start button click."""
        self.monitor.start()
        self.start_button.setEnabled(False)
        self.stop_button.setEnabled(True)
        self.status_label.setText("Status: Monitoring")

    def stop_monitoring(self):
        """Handle stop button click."""
        self.monitor.stop()
        self.start_button.setEnabled(True)
        self.stop_button.setEnabled(False)
        self.status_label.setText("Status: Stopped")

    def on_monitor_updated(self, samples, stats):
        """Re-render from the snapshot published by the monitor."""
        self.render(samples, stats)
        if samples and not samples[-1].connected:
            self.status_label.setText("Status: Disconnected")
        elif self.monitor.is_monitoring:
            self.status_label.setText("Status: Monitoring")

    def on_monitor_error(self, error_msg):
        """Show unexpected probe errors without interrupting monitoring."""
        self.status_label.setText(f"Status: Probe error - {error_msg}")

    def render(self, samples, stats):
        """Update statistics labels, charts and table."""
        text = format_statistics(stats)
        self.uptime_label.setText(f"Uptime: {text['uptime']}")
        self.downtime_label.setText(f"Downtime: {text['downtime']}")
        self.latency_label.setText(f"Average Latency: {text['avg_latency']}")

        series = build_series(samples)
        self.status_curve.setData(list(series.timestamps), list(series.status))
        self.latency_curve.setData(list(series.timestamps), list(series.latency))

        self.sample_model.sync(samples)
        self.table.scrollToBottom()
