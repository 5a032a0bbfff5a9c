"""Request observers for plan requests."""

import threading
import time
from collections import deque
from typing import Callable, Deque, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram


class PlanObserver:
    """Receives notifications about plan requests. Hooks do nothing by default."""

    def request_started(self, platform: str, rancher: str, kubernetes: str) -> None:
        pass

    def request_finished(self, duration: float, error: Optional[Exception] = None) -> None:
        pass


class PrometheusObserver(PlanObserver):
    """Prometheus metrics for plan requests.

    Metrics:
        requests_in_last_60_seconds (Gauge)
        active_requests (Gauge)
        versions_submitted_total (Counter, platform/rancher_version/k8s_version)
        request_duration_seconds (Histogram)
        plan_requests_total (Counter, result)

    Collectors are registered on the given registry so several observers can
    coexist, e.g. one per test.
    """

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.window_seconds = window_seconds
        self.clock = clock
        self._timestamps: Deque[float] = deque()
        self._lock = threading.Lock()

        self.requests_in_window = Gauge(
            "requests_in_last_60_seconds",
            "Number of requests in the last 60 seconds",
            registry=self.registry,
        )
        self.active_requests = Gauge(
            "active_requests",
            "Current number of active requests",
            registry=self.registry,
        )
        self.versions_submitted = Counter(
            "versions_submitted_total",
            "Total number of versions submitted",
            labelnames=["platform", "rancher_version", "k8s_version"],
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "request_duration_seconds",
            "Histogram of response latency (seconds) of requests",
            registry=self.registry,
        )
        self.requests_total = Counter(
            "plan_requests_total",
            "Total plan requests by result",
            labelnames=["result"],
            registry=self.registry,
        )

    def _refresh_window(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()
        self.requests_in_window.set(len(self._timestamps))

    def request_started(self, platform: str, rancher: str, kubernetes: str) -> None:
        self.active_requests.inc()
        self.versions_submitted.labels(
            platform=platform, rancher_version=rancher, k8s_version=kubernetes
        ).inc()
        with self._lock:
            now = self.clock()
            self._timestamps.append(now)
            self._refresh_window(now)

    def request_finished(self, duration: float, error: Optional[Exception] = None) -> None:
        self.active_requests.dec()
        self.request_duration.observe(duration)
        self.requests_total.labels(result="error" if error is not None else "success").inc()

    def refresh(self) -> None:
        """Expire requests that left the sliding window."""
        with self._lock:
            self._refresh_window(self.clock())
