from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)
from core.logging import get_logger

logger = get_logger("monitoring.prometheus_exporter")

# Registry dedicato, non quello globale di prometheus_client.
_REGISTRY = CollectorRegistry()

UPSTREAM_REQUESTS_TOTAL = Counter(
    "proxy_upstream_requests_total",
    "Chiamate all'API-Football per endpoint ed esito",
    labelnames=("endpoint", "outcome"),
    registry=_REGISTRY,
)
UPSTREAM_LATENCY_SECONDS = Histogram(
    "proxy_upstream_latency_seconds",
    "Latenza chiamate API-Football in secondi",
    labelnames=("endpoint",),
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0),
    registry=_REGISTRY,
)
REJECTED_REQUESTS_TOTAL = Counter(
    "proxy_rejected_requests_total",
    "Richieste rifiutate prima della chiamata upstream",
    labelnames=("route", "reason"),
    registry=_REGISTRY,
)


def record_upstream_call(endpoint: str, outcome: str, latency_s: float) -> None:
    """outcome: ok | http_error | timeout | network | invalid_json"""
    UPSTREAM_REQUESTS_TOTAL.labels(endpoint=endpoint, outcome=outcome).inc()
    UPSTREAM_LATENCY_SECONDS.labels(endpoint=endpoint).observe(latency_s)


def record_rejection(route: str, reason: str) -> None:
    REJECTED_REQUESTS_TOTAL.labels(route=route, reason=reason).inc()


def generate_prometheus_text() -> bytes:
    return generate_latest(_REGISTRY)


__all__ = [
    "record_upstream_call",
    "record_rejection",
    "generate_prometheus_text",
    "_REGISTRY",
]
