"""HTTP reachability prober for LinkWatch using requests."""

import logging
import time
from datetime import datetime, timezone

import requests

from linkwatch.constants import PROBE_TIMEOUT_S, TARGET_URL
from linkwatch.models import Sample

logger = logging.getLogger(__name__)


class HttpProber:
    """Prober that issues one HTTPS request to a fixed endpoint.

    The response itself is never inspected: any HTTP response, whatever its
    status code or body, means the target is reachable. Only transport-level
    failures (DNS resolution, refused connection, TLS handshake, timeout)
    count as a disconnect, and their details are not reported.
    """

    def __init__(self, url: str = TARGET_URL, timeout_s: float = PROBE_TIMEOUT_S):
        """Initialize HTTP prober.

        Args:
            url: Endpoint to request
            timeout_s: Connect/read timeout in seconds. Must be positive.
        """
        if timeout_s <= 0:
            raise ValueError("timeout_s must be positive")

        self.url = url
        self.timeout_s = timeout_s
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": "linkwatch/1.0"})

        logger.debug("HttpProber initialized: url=%s, timeout=%.1fs", url, timeout_s)

    def probe(self) -> Sample:
        """Probe the endpoint once.

        Returns:
            Connected sample with elapsed milliseconds, or a disconnected sample
        """
        start = time.perf_counter()

        try:
            response = self._session.get(
                self.url,
                timeout=self.timeout_s,
                allow_redirects=False,
                stream=True,  # Headers are enough, skip the body
            )
            response.close()
        except requests.RequestException:
            logger.debug("Probe failed: url=%s", self.url)
            return Sample.disconnected_at(datetime.now(timezone.utc))

        latency = (time.perf_counter() - start) * 1000.0
        logger.debug("Probe succeeded: url=%s, latency=%.2fms", self.url, latency)
        return Sample.connected_at(datetime.now(timezone.utc), round(latency, 2))

    def close(self):
        """Release pooled connections."""
        self._session.close()
