"""Distributed tracing backed by OpenTelemetry."""

from .otel_config import (
    OtelTelemetryProvider,
    OtelTracerAdapter,
    OtelTracerProviderAdapter,
    OtelTraceSpanAdapter,
)

__all__ = [
    "OtelTelemetryProvider",
    "OtelTracerAdapter",
    "OtelTracerProviderAdapter",
    "OtelTraceSpanAdapter",
]
