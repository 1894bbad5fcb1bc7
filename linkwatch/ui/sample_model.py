"""Qt model for sample history using model/view pattern."""

from collections import deque

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from linkwatch.constants import MAX_TABLE_ROWS, TIME_LABEL_FORMAT
from linkwatch.models import Sample


class SampleTableModel(QAbstractTableModel):
    """Table model for probe samples.

    Holds the most recent samples in a deque and trims the oldest row with
    beginRemoveRows/endRemoveRows once max_rows is reached.
    """

    def __init__(self, max_rows: int = MAX_TABLE_ROWS, parent=None):
        super().__init__(parent)
        self._samples = deque()  # No maxlen - we manage manually
        self._max_rows = max_rows

        self._columns = ["Time", "Status", "Latency (ms)"]

        # Cached strings to reduce allocations
        self._connected = "Connected"
        self._disconnected = "Disconnected"
        self._dash = "--"

    def rowCount(self, parent=QModelIndex()):
        """Return the number of rows (samples)."""
        if parent.isValid():
            return 0
        return len(self._samples)

    def columnCount(self, parent=QModelIndex()):
        """Return the number of columns."""
        if parent.isValid():
            return 0
        return len(self._columns)

    def data(self, index, role=Qt.DisplayRole):
        """Return data for a given cell."""
        if not index.isValid():
            return None

        if index.row() >= len(self._samples) or index.row() < 0:
            return None

        sample = self._samples[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            if col == 0:  # Time
                return sample.ts.astimezone().strftime(TIME_LABEL_FORMAT)
            elif col == 1:  # Status
                return self._connected if sample.connected else self._disconnected
            elif col == 2:  # Latency
                if not sample.connected:
                    return self._dash
                return f"{sample.latency_ms:.2f}"

        elif role == Qt.TextAlignmentRole:
            if col == 2:
                return Qt.AlignRight | Qt.AlignVCenter
            elif col == 1:
                return Qt.AlignCenter
            return Qt.AlignLeft | Qt.AlignVCenter

        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        """Return header data."""
        if role == Qt.DisplayRole and orientation == Qt.Horizontal:
            if 0 <= section < len(self._columns):
                return self._columns[section]
        return None

    def flags(self, index):
        """Return item flags (read-only)."""
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable

    def append_sample(self, sample: Sample):
        """Append a new sample, dropping the oldest row when at capacity."""
        if len(self._samples) >= self._max_rows:
            self.beginRemoveRows(QModelIndex(), 0, 0)
            self._samples.popleft()
            self.endRemoveRows()

        new_row = len(self._samples)
        self.beginInsertRows(QModelIndex(), new_row, new_row)
        self._samples.append(sample)
        self.endInsertRows()

    def sync(self, samples):
        """Append whatever is newer than the last row shown.

        Args:
            samples: Full ordered sample snapshot from the monitor
        """
        last = self._samples[-1] if self._samples else None
        start = 0
        if last is not None:
            # Snapshots are append-only, so the last row is found from the end
            for i in range(len(samples) - 1, -1, -1):
                if samples[i] is last:
                    start = i + 1
                    break

        for sample in samples[max(start, len(samples) - self._max_rows):]:
            self.append_sample(sample)

    def get_samples(self):
        """Get all displayed samples."""
        return list(self._samples)
