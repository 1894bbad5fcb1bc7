"""Tests for FakeProber."""

from datetime import datetime, timezone

from linkwatch.fake_prober import FakeProber
from linkwatch.models import ConnectionStatus, Sample


class TestFakeProber:
    def test_probe_returns_sample(self):
        sample = FakeProber(seed=1).probe()

        assert isinstance(sample, Sample)
        assert isinstance(sample.ts, datetime)
        assert sample.ts.tzinfo is timezone.utc
        assert sample.latency_ms >= 0.0

    def test_deterministic_with_seed(self):
        probers = (FakeProber(seed=42), FakeProber(seed=42))

        a = [probers[0].probe() for _ in range(50)]
        b = [probers[1].probe() for _ in range(50)]

        assert [(s.status, s.latency_ms) for s in a] == [(s.status, s.latency_ms) for s in b]

    def test_always_disconnected(self):
        prober = FakeProber(seed=3)
        prober.disconnect_probability = 1.0

        samples = [prober.probe() for _ in range(10)]

        assert all(s.status is ConnectionStatus.DISCONNECTED for s in samples)
        assert all(s.latency_ms == 0.0 for s in samples)

    def test_never_disconnected_latency_positive(self):
        prober = FakeProber(seed=4)
        prober.disconnect_probability = 0.0

        samples = [prober.probe() for _ in range(100)]

        assert all(s.connected for s in samples)
        assert all(s.latency_ms > 0.0 for s in samples)
