"""Prober abstraction for LinkWatch reachability checks."""

from typing import Protocol

from linkwatch.models import Sample


class Prober(Protocol):
    """Protocol defining the interface for reachability probers."""

    def probe(self) -> Sample:
        """Run one reachability check and return its sample."""
        ...

    def close(self) -> None:
        """Release any resources held by the prober."""
        ...
