"""Prometheus metrics for projection volume, failures and latency"""

from prometheus_client import Counter, Histogram

projection_counter = Counter(
    "household_projection_total",
    "Billing projections computed",
)

projection_failures_counter = Counter(
    "household_projection_failures_total",
    "Projections rejected because of invalid input",
    ["error"],  # InvalidDateFormat | InvalidInstallmentCount | UnresolvableCardReference
)

projection_duration_histogram = Histogram(
    "household_projection_duration_seconds",
    "Time spent inside the billing projector",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 1.0],
)

projected_purchases_histogram = Histogram(
    "household_projection_purchases",
    "Purchases per projection request",
    buckets=[0, 10, 50, 100, 500, 1000, 5000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(purchase_count: int) -> None:
    """Record a successful projection; duration is timed around the projector call itself"""
    projection_counter.inc()
    projected_purchases_histogram.observe(purchase_count)


def record_projection_failure(error: Exception) -> None:
    """Count a rejected projection by error kind"""
    projection_failures_counter.labels(error=type(error).__name__).inc()
