"""Data models for LinkWatch samples and statistics."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ConnectionStatus(Enum):
    """Outcome of a single reachability probe."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass(frozen=True)
class Sample:
    """A single probe observation."""

    ts: datetime
    status: ConnectionStatus
    latency_ms: float = 0.0  # 0 when disconnected

    def __post_init__(self):
        """Ensure consistency between status and latency_ms fields."""
        if self.status is ConnectionStatus.DISCONNECTED:
            object.__setattr__(self, "latency_ms", 0.0)
        elif self.latency_ms < 0:
            raise ValueError("latency_ms must be non-negative")

    @property
    def connected(self) -> bool:
        return self.status is ConnectionStatus.CONNECTED

    @classmethod
    def connected_at(cls, ts: datetime, latency_ms: float) -> "Sample":
        return cls(ts=ts, status=ConnectionStatus.CONNECTED, latency_ms=latency_ms)

    @classmethod
    def disconnected_at(cls, ts: datetime) -> "Sample":
        return cls(ts=ts, status=ConnectionStatus.DISCONNECTED, latency_ms=0.0)


@dataclass(frozen=True)
class Statistics:
    """Aggregate view of a sample log."""

    uptime_pct: float = 0.0
    downtime_pct: float = 0.0
    avg_latency_ms: float = 0.0
