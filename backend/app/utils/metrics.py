"""Prometheus metrics for note generation and the request log."""

from prometheus_client import Counter, Histogram

# Generation metrics
notes_generation_total = Counter(
    "notes_generation_total",
    "Total notes generations",
    ["policy", "outcome"],
)

notes_generation_latency_ms = Histogram(
    "notes_generation_latency_ms",
    "Notes generation latency in milliseconds",
    ["policy", "outcome"],
    buckets=[1, 10, 50, 100, 500, 1000, 2000, 5000, 10000, 30000],
)

notes_fallback_total = Counter(
    "notes_fallback_total",
    "Total fallbacks from assisted to template generation",
    ["reason"],
)

# Request log metrics
notes_requests_recorded_total = Counter(
    "notes_requests_recorded_total",
    "Total notes requests written to the request log",
    ["backend"],
)


class PrometheusGenerationMetrics:
    """Prometheus-based generation metrics implementation."""

    def record_generation(self, policy: str, outcome: str, latency_ms: float) -> None:
        """Count a generation and record its latency."""
        notes_generation_total.labels(policy=policy, outcome=outcome).inc()
        notes_generation_latency_ms.labels(policy=policy, outcome=outcome).observe(latency_ms)

    def inc_fallback(self, reason: str) -> None:
        """Increment fallback counter."""
        notes_fallback_total.labels(reason=reason).inc()

    def inc_recorded(self, backend: str) -> None:
        """Increment request log write counter."""
        notes_requests_recorded_total.labels(backend=backend).inc()
