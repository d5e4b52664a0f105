"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from contextlib import contextmanager

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

from app.services.interfaces.ring_provider import RingProviderError

# Ring query metrics
ring_queries = Counter(
    'ring_queries_total',
    'Ring availability queries',
    ['operation', 'result']  # next/all/availability, found/not_found/listed/available/locked
)

ring_provider_errors = Counter(
    'ring_provider_errors_total',
    'Ring provider failures',
    ['operation']
)

ring_provider_latency = Histogram(
    'ring_provider_latency_seconds',
    'Ring provider call latency',
    ['operation'],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_ring_query(operation: str, result: str):
    """Record ring query. Operation: next, all, availability"""
    ring_queries.labels(operation=operation, result=result).inc()


def record_provider_error(operation: str):
    ring_provider_errors.labels(operation=operation).inc()


@contextmanager
def observe_provider_call(operation: str):
    """Time a provider call and count its failures."""
    with ring_provider_latency.labels(operation=operation).time():
        try:
            yield
        except RingProviderError:
            record_provider_error(operation)
            raise
