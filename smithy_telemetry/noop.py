"""No-op telemetry backend.

Used by clients when no telemetry provider is configured, and by tests
that do not care about emitted telemetry.
"""

from typing import Optional

from .interfaces import (
    Attributes,
    GaugeCallback,
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
from .provider import TelemetryProvider


class NoopGaugeHandle(GaugeHandle):
    def stop(self) -> None:
        pass


class NoopUpDownCounter(UpDownCounter):
    def add(self, value: int, attributes: Attributes) -> None:
        pass


class NoopMonotonicCounter(MonotonicCounter):
    def add(self, value: int, attributes: Attributes) -> None:
        pass


class NoopHistogram(Histogram):
    def record(self, value: float, attributes: Attributes) -> None:
        pass


class NoopMeter(Meter):
    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        return NoopGaugeHandle()

    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        return NoopUpDownCounter()

    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        return NoopMonotonicCounter()

    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        return NoopHistogram()


class NoopMeterProvider(MeterProvider):
    def get_meter(self, scope: str, attributes: Optional[Attributes] = None) -> Meter:
        return NoopMeter()


class NoopTraceSpan(TraceSpan):
    def emit_event(self, name: str, attributes: Optional[Attributes] = None) -> None:
        pass

    def set_attribute(self, key: str, value: str) -> None:
        pass

    def set_status(self, status: TraceSpanStatus) -> None:
        pass

    def end(self) -> None:
        pass


class NoopTracer(Tracer):
    def create_span(
        self,
        name: str,
        attributes: Optional[Attributes] = None,
        span_kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        return NoopTraceSpan(name)


class NoopTracerProvider(TracerProvider):
    def get_tracer(self, scope: str, attributes: Optional[Attributes] = None) -> Tracer:
        return NoopTracer()


def create_noop_provider() -> TelemetryProvider:
    """Create a telemetry provider that discards everything."""
    return TelemetryProvider(NoopTracerProvider(), NoopMeterProvider())
