"""Prometheus metrics for place lookups and itinerary enrichment."""

from prometheus_client import Counter, Histogram

lookup_latency_ms = Histogram(
    "place_lookup_latency_ms",
    "Place lookup latency in milliseconds",
    ["operation", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000],
)

lookup_errors_total = Counter(
    "place_lookup_errors_total",
    "Total place lookup failures",
    ["operation", "reason"],
)

enrichment_total = Counter(
    "activity_enrichment_total",
    "Activity coordinate enrichment attempts",
    ["outcome"],
)


class PrometheusLookupMetrics:
    """Prometheus-based lookup metrics implementation."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record lookup latency."""
        lookup_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_error(self, operation: str, reason: str) -> None:
        """Increment lookup error counter."""
        lookup_errors_total.labels(operation=operation, reason=reason).inc()

    def inc_enrichment(self, outcome: str) -> None:
        """Count an enrichment outcome (enriched, failed, timeout, cancelled)."""
        enrichment_total.labels(outcome=outcome).inc()
