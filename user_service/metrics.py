"""
Prometheus metrics for User Service.

Tracks HTTP requests and repository operations against the cache.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "user_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "user_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)

# Repository metrics
user_repository_operations_total = Counter(
    "user_repository_operations_total",
    "Total repository operations against the cache",
    ["operation", "status"],
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_repository_operation(operation: str, status: str):
    """Track a repository operation outcome (value, empty, error)."""
    user_repository_operations_total.labels(operation=operation, status=status).inc()


def metrics_response() -> Response:
    """Render all metrics in Prometheus text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
