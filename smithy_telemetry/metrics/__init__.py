"""Metrics backends: OpenTelemetry and Prometheus."""

from .otel_meter import OtelMeterAdapter, OtelMeterProviderAdapter
from .prometheus_metrics import (
    PrometheusMeter,
    PrometheusMeterProvider,
    create_prometheus_provider,
    get_metrics_handler,
)

__all__ = [
    "OtelMeterAdapter",
    "OtelMeterProviderAdapter",
    "PrometheusMeter",
    "PrometheusMeterProvider",
    "create_prometheus_provider",
    "get_metrics_handler",
]
