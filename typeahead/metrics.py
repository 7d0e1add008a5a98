"""
Prometheus metrics for Typeahead Service.

Tracks HTTP traffic and typeahead query volume, latency and result sizes.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "typeahead_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "typeahead_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

# Typeahead metrics
typeahead_queries_total = Counter(
    "typeahead_queries_total", "Total typeahead queries", ["query_type", "status"]
)

typeahead_query_duration_seconds = Histogram(
    "typeahead_query_duration_seconds",
    "Typeahead query duration in seconds",
    ["query_type"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

typeahead_results_per_query = Histogram(
    "typeahead_results_per_query",
    "Number of results returned per query",
    ["query_type"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 250),
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_typeahead_query(
    query_type: str, success: bool, duration: float, result_count: int = 0
):
    """Track typeahead query metrics."""
    status = "success" if success else "failure"
    typeahead_queries_total.labels(query_type=query_type, status=status).inc()
    typeahead_query_duration_seconds.labels(query_type=query_type).observe(duration)
    if success:
        typeahead_results_per_query.labels(query_type=query_type).observe(result_count)


def metrics_endpoint() -> Response:
    """Prometheus exposition endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
