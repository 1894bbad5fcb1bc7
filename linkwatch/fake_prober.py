"""Simulated prober for LinkWatch testing and offline demos."""

import random
from datetime import datetime, timezone

from linkwatch.models import Sample


class FakeProber:
    """Generates simulated probe samples without touching the network."""

    def __init__(self, seed: int | None = None):
        """Initialize with optional random seed for deterministic behavior."""
        # Isolated random instance, probes run on worker threads
        self._random = random.Random(seed)

        # Simulation parameters
        self.base_latency = 40.0  # Base HTTPS round trip in ms
        self.latency_variance = 8.0
        self.spike_probability = 0.05
        self.spike_multiplier = 4.0
        self.disconnect_probability = 0.03

    def probe(self) -> Sample:
        """Generate a single simulated sample."""
        timestamp = datetime.now(timezone.utc)

        if self._random.random() < self.disconnect_probability:
            return Sample.disconnected_at(timestamp)

        if self._random.random() < self.spike_probability:
            latency = self.base_latency * self.spike_multiplier + self._random.gauss(
                0, self.latency_variance
            )
        else:
            latency = self.base_latency + self._random.gauss(0, self.latency_variance)

        latency = max(0.1, latency)

        return Sample.connected_at(timestamp, round(latency, 2))

    def close(self):
        """Nothing to release."""
