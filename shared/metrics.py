"""
Shared metrics configuration for SurahKit.
"""

from typing import Dict, Any, Optional
import threading

from prometheus_client import Counter, Histogram, CollectorRegistry


class MetricsCollector:
    """Prometheus metrics for the partition cache.

    Each collector owns its registry unless one is supplied, so several
    isolated caches can live in one process (and in one test session)
    without duplicate-registration errors.
    """

    def __init__(self, service_name: str = "surahkit", registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up partition cache metrics."""
        self._metrics["partition_requests_total"] = Counter(
            "partition_requests_total",
            "Partition requests by cache outcome",
            ["outcome"],
            registry=self.registry
        )

        self._metrics["partition_retrievals_total"] = Counter(
            "partition_retrievals_total",
            "Partition retrievals by result",
            ["result"],
            registry=self.registry
        )

        self._metrics["partition_retrieval_duration_seconds"] = Histogram(
            "partition_retrieval_duration_seconds",
            "Partition retrieval duration in seconds",
            ["result"],
            registry=self.registry
        )

    def get_sample_value(self, name: str, **labels) -> Optional[float]:
        """Read back a sample from this collector's registry."""
        return self.registry.get_sample_value(name, labels)

    def increment_counter(self, metric_name: str, **labels):
        """Increment a counter metric."""
        if metric_name in self._metrics:
            with self._lock:
                self._metrics[metric_name].labels(**labels).inc()

    def observe_histogram(self, metric_name: str, value: float, **labels):
        """Observe a histogram metric."""
        if metric_name in self._metrics:
            with self._lock:
                self._metrics[metric_name].labels(**labels).observe(value)
