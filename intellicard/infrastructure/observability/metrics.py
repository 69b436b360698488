"""Prometheus metrics for projection volume, latency and data quality"""

from prometheus_client import Counter, Histogram, Gauge

# Projection metrics
projection_counter = Counter(
    "intellicard_projection_total",
    "Total projection computations",
    ["kind"],  # projection | details
)

projection_duration_histogram = Histogram(
    "intellicard_projection_duration_seconds",
    "Projection computation time",
    ["kind"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)

orphaned_transactions_gauge = Gauge(
    "intellicard_orphaned_transactions",
    "Transactions referencing a missing card in the last computation",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(kind: str, duration_seconds: float, orphan_count: int) -> None:
    """Record projection metrics for monitoring volume and input quality"""
    projection_counter.labels(kind=kind).inc()
    projection_duration_histogram.labels(kind=kind).observe(duration_seconds)
    orphaned_transactions_gauge.set(orphan_count)
