"""Prometheus metrics for monitoring dashboard loads, store fetches, and exports"""

from prometheus_client import Counter, Histogram

# Dashboard metrics
dashboard_load_counter = Counter(
    "dashboard_load_total",
    "Transaction dashboard loads",
    ["role", "outcome"],  # outcome: ok | failed
)

export_counter = Counter(
    "dashboard_export_total",
    "CSV exports generated",
    ["role"],
)

# Document store metrics
store_fetch_latency_histogram = Histogram(
    "store_fetch_latency_seconds",
    "Document store query response time",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

store_fetch_failures_counter = Counter(
    "store_fetch_failures_total",
    "Failed document store queries",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def normalize_role(role: str) -> str:
    """Collapse free-form roles so label cardinality stays bounded"""
    return role if role in ("admin", "seller") else "buyer"


def record_dashboard_load(role: str, failed: bool) -> None:
    """Record one dashboard load for success-rate monitoring per role"""
    outcome = "failed" if failed else "ok"
    dashboard_load_counter.labels(role=normalize_role(role), outcome=outcome).inc()


def record_export(role: str) -> None:
    export_counter.labels(role=normalize_role(role)).inc()
