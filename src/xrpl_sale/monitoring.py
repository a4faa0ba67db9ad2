"""
Request statistics for XRPL.Sale client.

Tracks per-request latency and outcome so callers can inspect how the
API has been behaving (including time spent in retries).
"""

import time
from collections import OrderedDict, deque
from dataclasses import dataclass
from typing import Deque, List, Optional


@dataclass(frozen=True)
class RequestMetrics:
    """Metrics for a single request."""
    endpoint: str
    method: str
    status_code: int
    duration_ms: float
    timestamp: float

    @property
    def succeeded(self) -> bool:
        return 200 <= self.status_code < 400


@dataclass
class Statistics:
    """Client performance statistics."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_duration_ms: float = 0.0
    min_duration_ms: float = float("inf")
    max_duration_ms: float = 0.0

    @property
    def avg_duration_ms(self) -> float:
        if not self.total_requests:
            return 0.0
        return self.total_duration_ms / self.total_requests

    def update(self, metrics: RequestMetrics) -> None:
        """Update statistics with new request metrics."""
        self.total_requests += 1
        self.total_duration_ms += metrics.duration_ms
        self.min_duration_ms = min(self.min_duration_ms, metrics.duration_ms)
        self.max_duration_ms = max(self.max_duration_ms, metrics.duration_ms)

        if metrics.succeeded:
            self.successful_requests += 1
        else:
            self.failed_requests += 1


class PerformanceMonitor:
    """Monitors client performance and tracks metrics."""

    def __init__(self, max_history: int = 1000, max_endpoints: Optional[int] = None):
        self._history: Deque[RequestMetrics] = deque(maxlen=max_history)
        self._statistics = Statistics()
        # Least recently used endpoints are evicted past the limit
        self._max_endpoints = max_endpoints or max_history
        self._by_endpoint: "OrderedDict[str, Statistics]" = OrderedDict()

    def record_request(
        self,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
    ) -> None:
        """Record metrics for a completed request."""
        metrics = RequestMetrics(
            endpoint=endpoint,
            method=method,
            status_code=status_code,
            duration_ms=duration_ms,
            timestamp=time.time(),
        )
        self._statistics.update(metrics)
        self._endpoint_entry(f"{method} {endpoint}").update(metrics)
        self._history.append(metrics)

    def _endpoint_entry(self, key: str) -> Statistics:
        stats = self._by_endpoint.get(key)
        if stats is None:
            stats = self._by_endpoint[key] = Statistics()
            while len(self._by_endpoint) > self._max_endpoints:
                self._by_endpoint.popitem(last=False)
        else:
            self._by_endpoint.move_to_end(key)
        return stats

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    def get_endpoint_stats(self, endpoint: str, method: str) -> Statistics:
        """Statistics for one endpoint (empty if never called)."""
        return self._by_endpoint.get(f"{method} {endpoint}", Statistics())

    def get_recent_requests(self, count: int = 10) -> List[RequestMetrics]:
        return list(self._history)[-count:]

    def get_error_rate(self, window_seconds: float = 60.0) -> float:
        """Get error rate for the recent time window."""
        cutoff = time.time() - window_seconds
        recent = [m for m in self._history if m.timestamp >= cutoff]
        if not recent:
            return 0.0
        return sum(1 for m in recent if not m.succeeded) / len(recent)

    def reset(self) -> None:
        self._history.clear()
        self._statistics = Statistics()
        self._by_endpoint.clear()
