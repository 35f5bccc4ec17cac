"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_operations = Counter(
    'booking_operations_total',
    'Booking service calls by operation and outcome',
    ['operation', 'outcome']  # get/create/update; ok, not_found, forbidden, room_full, ...
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking request latency',
    ['operation'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Auth metrics
auth_attempts = Counter(
    'auth_attempts_total',
    'Sign-up and sign-in attempts',
    ['action', 'result']  # signup/signin; success, failure
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_outcome(operation: str, outcome: str):
    """Record a booking service result. Outcome is "ok" or a failure kind."""
    booking_operations.labels(operation=operation, outcome=outcome).inc()


def record_auth_attempt(action: str, success: bool):
    result = "success" if success else "failure"
    auth_attempts.labels(action=action, result=result).inc()
