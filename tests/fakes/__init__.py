"""Recording collaborators for client tests.

Each fake records what the client asked of it so tests can assert on
endpoint parameters, dispatched requests and emitted telemetry.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from botocore.credentials import Credentials

from service_clients.config import ClientConfiguration
from service_clients.core import (
    EndpointParameter,
    EndpointProvider,
    HttpResponse,
    HttpTransport,
    Outcome,
    ResolvedEndpoint,
)
from service_clients.core.outcome import endpoint_resolution_failure
from smithy_telemetry import (
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    SpanKind,
    TelemetryProvider,
    TraceSpan,
    TraceSpanStatus,
    Tracer,
    TracerProvider,
    UpDownCounter,
)

STATIC_CREDENTIALS = Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


def make_config(**overrides: Any) -> ClientConfiguration:
    """Client configuration independent of the test environment."""
    values: Dict[str, Any] = {
        "region": "us-west-2",
        "endpoint_url": None,
        "use_fips_endpoint": False,
        "use_dualstack_endpoint": False,
        "executor_max_workers": 2,
    }
    values.update(overrides)
    return ClientConfiguration(**values)


class RecordingEndpointProvider(EndpointProvider):
    """Resolves to a fixed URL, or fails with a fixed message."""

    def __init__(self, url: str = "https://service.us-west-2.amazonaws.com", error: Optional[str] = None):
        self.url = url
        self.error = error
        self.resolve_calls: List[Sequence[EndpointParameter]] = []
        self.init_configs: List[ClientConfiguration] = []
        self.overrides: List[str] = []

    def init_built_in_parameters(self, config) -> None:
        self.init_configs.append(config)

    def override_endpoint(self, endpoint: str) -> None:
        self.overrides.append(endpoint)
        self.url = endpoint

    def resolve_endpoint(self, params: Sequence[EndpointParameter]) -> Outcome[ResolvedEndpoint]:
        self.resolve_calls.append(params)
        if self.error is not None:
            return Outcome.failure(endpoint_resolution_failure(self.error))
        return Outcome.success(ResolvedEndpoint(url=self.url))


class RecordingTransport(HttpTransport):
    """Returns canned responses and records every prepared request."""

    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b"{}",
        headers: Optional[Dict[str, str]] = None,
        error: Optional[Exception] = None,
        metrics: Optional[Dict[str, float]] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.headers = headers if headers is not None else {"x-amzn-RequestId": "req-0001"}
        self.error = error
        self.metrics = metrics or {}
        self.requests: List[Any] = []
        self.closed = False
        self._lock = threading.Lock()

    def send(self, request) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if self.error is not None:
            raise self.error
        return HttpResponse(self.status_code, dict(self.headers), self.body, dict(self.metrics))

    def close(self) -> None:
        self.closed = True


@dataclass
class HistogramSample:
    name: str
    units: str
    value: float
    attributes: Dict[str, str]


class _RecordingHistogram(Histogram):
    def __init__(self, recorder: "RecordingTelemetry", name: str, units: str) -> None:
        self._recorder = recorder
        self._name = name
        self._units = units

    def record(self, value: float, attributes) -> None:
        self._recorder.record_sample(HistogramSample(self._name, self._units, value, dict(attributes)))


class _RecordingCounter(MonotonicCounter, UpDownCounter):
    def __init__(self) -> None:
        self.total = 0

    def add(self, value: int, attributes) -> None:
        self.total += value


class _RecordingGauge(GaugeHandle):
    def __init__(self) -> None:
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class _RecordingMeter(Meter):
    def __init__(self, recorder: "RecordingTelemetry") -> None:
        self._recorder = recorder

    def create_gauge(self, name, callback, units="", description=""):
        return _RecordingGauge()

    def create_up_down_counter(self, name, units="", description=""):
        return _RecordingCounter()

    def create_counter(self, name, units="", description=""):
        return _RecordingCounter()

    def create_histogram(self, name, units="", description=""):
        return _RecordingHistogram(self._recorder, name, units)


class _RecordingMeterProvider(MeterProvider):
    def __init__(self, recorder: "RecordingTelemetry") -> None:
        self._recorder = recorder

    def get_meter(self, scope, attributes=None):
        self._recorder.meter_scopes.append((scope, dict(attributes or {})))
        return _RecordingMeter(self._recorder)


@dataclass
class RecordingSpan(TraceSpan):
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    kind: SpanKind = SpanKind.INTERNAL
    status: TraceSpanStatus = TraceSpanStatus.UNSET
    events: List[str] = field(default_factory=list)
    end_count: int = 0

    def emit_event(self, name, attributes=None) -> None:
        self.events.append(name)

    def set_attribute(self, key, value) -> None:
        self.attributes[key] = value

    def set_status(self, status) -> None:
        self.status = status

    def end(self) -> None:
        self.end_count += 1


class _RecordingTracer(Tracer):
    def __init__(self, recorder: "RecordingTelemetry") -> None:
        self._recorder = recorder

    def create_span(self, name, attributes=None, span_kind=SpanKind.INTERNAL):
        span = RecordingSpan(name, dict(attributes or {}), span_kind)
        self._recorder.record_span(span)
        return span


class _RecordingTracerProvider(TracerProvider):
    def __init__(self, recorder: "RecordingTelemetry") -> None:
        self._recorder = recorder
        self._tracers: Dict[str, _RecordingTracer] = {}

    def get_tracer(self, scope, attributes=None):
        self._recorder.tracer_scopes.append((scope, dict(attributes or {})))
        return self._tracers.setdefault(scope, _RecordingTracer(self._recorder))


class RecordingTelemetry:
    """Telemetry provider whose meters and tracers record into lists."""

    def __init__(self) -> None:
        self.samples: List[HistogramSample] = []
        self.spans: List[RecordingSpan] = []
        self.meter_scopes: List[Tuple[str, Dict[str, str]]] = []
        self.tracer_scopes: List[Tuple[str, Dict[str, str]]] = []
        self.init_calls = 0
        self._lock = threading.Lock()
        self.provider = TelemetryProvider(
            _RecordingTracerProvider(self), _RecordingMeterProvider(self), self._init
        )

    def _init(self) -> None:
        self.init_calls += 1

    def record_sample(self, sample: HistogramSample) -> None:
        with self._lock:
            self.samples.append(sample)

    def record_span(self, span: RecordingSpan) -> None:
        with self._lock:
            self.spans.append(span)

    def samples_named(self, name: str) -> List[HistogramSample]:
        return [sample for sample in self.samples if sample.name == name]
