"""Tests for chart series and statistics formatting."""

from datetime import datetime, timezone

from linkwatch.models import Sample, Statistics
from linkwatch.presentation import build_series, format_statistics


class TestBuildSeries:
    def test_empty(self):
        series = build_series(())

        assert series.labels == ()
        assert series.status == ()
        assert series.latency == ()
        assert series.timestamps == ()

    def test_parallel_series(self):
        samples = (
            Sample.connected_at(datetime(2024, 5, 1, 9, 5, 7), 42.5),
            Sample.disconnected_at(datetime(2024, 5, 1, 9, 5, 12)),
            Sample.connected_at(datetime(2024, 5, 1, 13, 0, 0), 18.0),
        )

        series = build_series(samples)

        assert series.labels == ("09:05:07", "09:05:12", "13:00:00")
        assert series.status == (1, 0, 1)
        assert series.latency == (42.5, 0.0, 18.0)
        assert series.timestamps == tuple(s.ts.timestamp() for s in samples)


    def test_utc_samples_labelled_in_local_time(self):
        ts = datetime(2024, 5, 1, 9, 5, 7, tzinfo=timezone.utc)

        series = build_series((Sample.connected_at(ts, 1.0),))

        assert series.labels == (ts.astimezone().strftime("%H:%M:%S"),)
        assert series.timestamps == (ts.timestamp(),)


class TestFormatStatistics:
    def test_zero(self):
        assert format_statistics(Statistics()) == {
            "uptime": "0.00%",
            "downtime": "0.00%",
            "avg_latency": "0.00 ms",
        }

    def test_two_decimals(self):
        text = format_statistics(Statistics(200 / 3, 100 / 3, 150.0))

        assert text["uptime"] == "66.67%"
        assert text["downtime"] == "33.33%"
        assert text["avg_latency"] == "150.00 ms"
