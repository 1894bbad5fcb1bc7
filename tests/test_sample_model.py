"""Tests for SampleTableModel (Qt model/view pattern)."""

from datetime import datetime, timedelta

from PySide6.QtCore import Qt

from linkwatch.models import Sample
from linkwatch.ui.sample_model import SampleTableModel

T0 = datetime(2024, 5, 1, 12, 0, 0)


def make_samples(count: int) -> tuple[Sample, ...]:
    return tuple(Sample.connected_at(T0 + timedelta(seconds=5 * i), float(i)) for i in range(count))


class TestSampleTableModel:
    """Test SampleTableModel behavior."""

    def test_initial_state(self, qapp):
        model = SampleTableModel(max_rows=10)

        assert model.rowCount() == 0
        assert model.columnCount() == 3

    def test_column_headers(self, qapp):
        model = SampleTableModel()

        assert model.headerData(0, Qt.Horizontal, Qt.DisplayRole) == "Time"
        assert model.headerData(1, Qt.Horizontal, Qt.DisplayRole) == "Status"
        assert model.headerData(2, Qt.Horizontal, Qt.DisplayRole) == "Latency (ms)"

    def test_connected_row(self, qapp):
        model = SampleTableModel()
        model.append_sample(Sample.connected_at(T0, 10.5))

        assert model.data(model.index(0, 0), Qt.DisplayRole) == "12:00:00"
        assert model.data(model.index(0, 1), Qt.DisplayRole) == "Connected"
        assert model.data(model.index(0, 2), Qt.DisplayRole) == "10.50"

    def test_disconnected_row(self, qapp):
        model = SampleTableModel()
        model.append_sample(Sample.disconnected_at(T0))

        assert model.data(model.index(0, 1), Qt.DisplayRole) == "Disconnected"
        assert model.data(model.index(0, 2), Qt.DisplayRole) == "--"

    def test_row_limit_enforced(self, qapp):
        model = SampleTableModel(max_rows=3)
        samples = make_samples(5)

        for sample in samples:
            model.append_sample(sample)

        assert model.rowCount() == 3
        assert model.get_samples() == list(samples[2:])

    def test_invalid_index_returns_none(self, qapp):
        model = SampleTableModel()

        assert model.data(model.index(5, 0), Qt.DisplayRole) is None

    def test_sync_appends_only_new_samples(self, qapp):
        model = SampleTableModel(max_rows=10)
        samples = make_samples(6)

        model.sync(samples[:2])
        model.sync(samples[:4])
        model.sync(samples[:4])
        model.sync(samples)

        assert model.get_samples() == list(samples)

    def test_sync_respects_row_limit(self, qapp):
        model = SampleTableModel(max_rows=3)
        samples = make_samples(8)

        model.sync(samples)

        assert model.rowCount() == 3
        assert model.get_samples() == list(samples[-3:])
