"""Prometheus metrics for the RemitLend score service.

Metrics are organized into two categories:

Business Metrics (for Product/Risk):
- remitlend_score_lookups_total: Score lookups by band
- remitlend_score_updates_total: Score updates by repayment outcome and resulting band
- remitlend_score_delta: Distribution of applied score deltas

Technical Metrics (for Engineering/SRE):
- remitlend_errors_total: Classified error responses by kind
- remitlend_http_requests_total: HTTP requests by endpoint/status
- remitlend_http_request_latency_seconds: HTTP request latency by endpoint
"""

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

score_lookups_total = Counter(
    "remitlend_score_lookups_total",
    "Total number of score lookups",
    ["band"],
)

score_updates_total = Counter(
    "remitlend_score_updates_total",
    "Total number of repayment-driven score updates",
    ["outcome", "band"],  # outcome: on_time, late
)

score_delta = Histogram(
    "remitlend_score_delta",
    "Score delta actually applied after clamping",
    buckets=[-30, -15, -1, 0, 1, 15, 30],
)


# =============================================================================
# Technical Metrics
# =============================================================================

errors_total = Counter(
    "remitlend_errors_total",
    "Total number of error responses by classified kind",
    ["kind"],
)

http_requests_total = Counter(
    "remitlend_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "remitlend_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_score_lookup(band: str) -> None:
    """Record a score lookup."""
    score_lookups_total.labels(band=band).inc()


def record_score_update(on_time: bool, band: str, applied_delta: int) -> None:
    """Record a score update and the delta that survived clamping."""
    outcome = "on_time" if on_time else "late"
    score_updates_total.labels(outcome=outcome, band=band).inc()
    score_delta.observe(applied_delta)


def record_error(kind: str) -> None:
    """Record a classified error response."""
    errors_total.labels(kind=kind).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
