"""OpenTelemetry tracing adapters and the OpenTelemetry telemetry provider.

Provides span/tracer adapters over ``opentelemetry`` and a factory that
wires an SDK tracer provider and meter provider to OTLP exporters.
"""

import threading
from typing import Dict, FrozenSet, Optional, Tuple

import structlog
from opentelemetry import metrics as otel_metrics
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider as SdkMeterProvider
from opentelemetry.sdk.metrics.export import MetricReader, PeriodicExportingMetricReader
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import SpanProcessor
from opentelemetry.sdk.trace import TracerProvider as SdkTracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Status, StatusCode

from ..interfaces import (
    Attributes,
    SpanKind,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
)
from ..metrics.otel_meter import OtelMeterProviderAdapter
from ..provider import TelemetryProvider

logger = structlog.get_logger(__name__)

_SPAN_KINDS = {
    SpanKind.INTERNAL: trace.SpanKind.INTERNAL,
    SpanKind.CLIENT: trace.SpanKind.CLIENT,
    SpanKind.SERVER: trace.SpanKind.SERVER,
}

_STATUS_CODES = {
    TraceSpanStatus.UNSET: StatusCode.UNSET,
    TraceSpanStatus.OK: StatusCode.OK,
    TraceSpanStatus.ERROR: StatusCode.ERROR,
}


class OtelTraceSpanAdapter(TraceSpan):
    def __init__(self, name: str, otel_span: trace.Span) -> None:
        super().__init__(name)
        self.otel_span = otel_span
        self._ended = False
        self._activation = None

    def __enter__(self) -> "OtelTraceSpanAdapter":
        # Current for the block, so log entries and child spans see it
        self._activation = trace.use_span(self.otel_span, end_on_exit=False)
        self._activation.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            if self._activation is not None:
                self._activation.__exit__(None, None, None)
                self._activation = None

    def emit_event(self, name: str, attributes: Optional[Attributes] = None) -> None:
        self.otel_span.add_event(name, attributes=dict(attributes or {}))

    def set_attribute(self, key: str, value: str) -> None:
        self.otel_span.set_attribute(key, value)

    def set_status(self, status: TraceSpanStatus) -> None:
        self.otel_span.set_status(Status(_STATUS_CODES[status]))

    def end(self) -> None:
        if not self._ended:
            self._ended = True
            self.otel_span.end()


class OtelTracerAdapter(Tracer):
    def __init__(self, otel_tracer: trace.Tracer) -> None:
        self._tracer = otel_tracer

    def create_span(
        self,
        name: str,
        attributes: Optional[Attributes] = None,
        span_kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        otel_span = self._tracer.start_span(
            name,
            kind=_SPAN_KINDS[span_kind],
            attributes=dict(attributes or {}),
        )
        return OtelTraceSpanAdapter(name, otel_span)


class OtelTracerProviderAdapter(TracerProvider):
    """Caches one tracer adapter per (scope, attributes)."""

    def __init__(self, otel_provider: trace.TracerProvider) -> None:
        self.otel_provider = otel_provider
        self._tracers: Dict[Tuple[str, FrozenSet], OtelTracerAdapter] = {}
        self._lock = threading.Lock()

    def get_tracer(self, scope: str, attributes: Optional[Attributes] = None) -> Tracer:
        key = (scope, frozenset((attributes or {}).items()))
        with self._lock:
            tracer = self._tracers.get(key)
            if tracer is None:
                tracer = OtelTracerAdapter(
                    self.otel_provider.get_tracer(scope, attributes=dict(attributes or {}) or None)
                )
                self._tracers[key] = tracer
            return tracer


class OtelTelemetryProvider:
    """Factory for OpenTelemetry-backed telemetry providers."""

    @staticmethod
    def create_otel_provider(
        service_name: str = "aws-service-clients",
        otlp_endpoint: Optional[str] = None,
        span_processor: Optional[SpanProcessor] = None,
        metric_reader: Optional[MetricReader] = None,
        resource: Optional[Resource] = None,
        set_global: bool = True,
    ) -> TelemetryProvider:
        """Create a telemetry provider exporting to OpenTelemetry.

        Args:
            service_name: ``service.name`` resource attribute
            otlp_endpoint: OTLP gRPC endpoint; the exporters fall back to
                ``OTEL_EXPORTER_OTLP_ENDPOINT`` when omitted
            span_processor: Span processor to use instead of a batching
                OTLP exporter
            metric_reader: Metric reader to use instead of a periodic
                OTLP exporter
            resource: Resource to use instead of one built from service_name
            set_global: Install the SDK providers as the global
                OpenTelemetry providers when the provider is initialized

        Returns:
            A new TelemetryProvider owned by the caller
        """
        resource = resource or Resource.create({SERVICE_NAME: service_name})

        tracer_provider = SdkTracerProvider(resource=resource)
        if span_processor is None:
            span_processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))
        tracer_provider.add_span_processor(span_processor)

        if metric_reader is None:
            metric_reader = PeriodicExportingMetricReader(
                OTLPMetricExporter(endpoint=otlp_endpoint)
            )
        meter_provider = SdkMeterProvider(resource=resource, metric_readers=[metric_reader])

        def init() -> None:
            if set_global:
                trace.set_tracer_provider(tracer_provider)
                otel_metrics.set_meter_provider(meter_provider)
            logger.info(
                "otel_telemetry_initialized",
                service_name=service_name,
                otlp_endpoint=otlp_endpoint,
                set_global=set_global,
            )

        return TelemetryProvider(
            OtelTracerProviderAdapter(tracer_provider),
            OtelMeterProviderAdapter(meter_provider),
            init,
        )
