"""Smithy-style telemetry capabilities used by the generated service clients."""

from .interfaces import (
    AsyncMeasurement,
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    SpanKind,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
    UpDownCounter,
)
from .noop import create_noop_provider
from .provider import TelemetryProvider
from .timing import (
    SMITHY_CLIENT_DURATION,
    SMITHY_METRICS_THROUGHPUT,
    SMITHY_RESOLVE_ENDPOINT_DURATION,
    emit_core_http_metrics,
    make_call_with_timing,
)

__all__ = [
    "AsyncMeasurement",
    "GaugeHandle",
    "Histogram",
    "Meter",
    "MeterProvider",
    "MonotonicCounter",
    "SpanKind",
    "TraceSpan",
    "TraceSpanStatus",
    "Tracer",
    "TracerProvider",
    "UpDownCounter",
    "create_noop_provider",
    "TelemetryProvider",
    "SMITHY_CLIENT_DURATION",
    "SMITHY_METRICS_THROUGHPUT",
    "SMITHY_RESOLVE_ENDPOINT_DURATION",
    "emit_core_http_metrics",
    "make_call_with_timing",
]
