"""Prometheus-backed implementations of the meter interfaces.

Smithy metric names and attribute keys are dotted
(``smithy.client.duration``, ``rpc.method``); they are sanitized to
Prometheus names (``smithy_client_duration``, ``rpc_method``). Label
names of a collector are fixed by the first sample it records.
"""

import re
import threading
import weakref
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import structlog
from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram as PromHistogram,
    generate_latest,
)
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

from ..interfaces import (
    AsyncMeasurement,
    Attributes,
    GaugeCallback,
    GaugeHandle,
    Histogram,
    Meter,
    MeterProvider,
    MonotonicCounter,
    UpDownCounter,
)
from ..noop import NoopTracerProvider
from ..provider import TelemetryProvider

logger = structlog.get_logger(__name__)

# Client call durations are reported in milliseconds
DURATION_BUCKETS_MS = [1, 5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000, 30000]

_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_]")

# A registry accepts each metric name once, so every meter on a registry
# shares its collectors.
_REGISTRY_COLLECTORS = weakref.WeakKeyDictionary()
_REGISTRY_LOCK = threading.Lock()


def sanitize_name(name: str) -> str:
    """Convert a dotted metric or attribute name to a Prometheus name."""
    sanitized = _INVALID_NAME_CHARS.sub("_", name)
    if sanitized and sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized


def _labels(attributes: Attributes) -> Dict[str, str]:
    return {sanitize_name(k): str(v) for k, v in attributes.items()}


class _LazyCollector:
    """Creates the underlying Prometheus collector on first use.

    Prometheus needs label names up front while smithy instruments only
    learn them when the first sample arrives.
    """

    def __init__(self, factory: Callable[[Sequence[str]], object]) -> None:
        self._factory = factory
        self._collector = None
        self._labelnames: Tuple[str, ...] = ()
        self._lock = threading.Lock()

    def child(self, labels: Dict[str, str]):
        with self._lock:
            if self._collector is None:
                self._labelnames = tuple(sorted(labels))
                self._collector = self._factory(self._labelnames)
        if not self._labelnames:
            return self._collector
        return self._collector.labels(**labels)


class PrometheusHistogramAdapter(Histogram):
    def __init__(self, collector: _LazyCollector) -> None:
        self._collector = collector

    def record(self, value: float, attributes: Attributes) -> None:
        try:
            self._collector.child(_labels(attributes)).observe(value)
        except Exception as e:
            logger.warning("prometheus_histogram_record_failed", error=str(e))


class PrometheusCounterAdapter(MonotonicCounter):
    def __init__(self, collector: _LazyCollector) -> None:
        self._collector = collector

    def add(self, value: int, attributes: Attributes) -> None:
        try:
            self._collector.child(_labels(attributes)).inc(value)
        except Exception as e:
            logger.warning("prometheus_counter_add_failed", error=str(e))


class PrometheusUpDownCounterAdapter(UpDownCounter):
    def __init__(self, collector: _LazyCollector) -> None:
        self._collector = collector

    def add(self, value: int, attributes: Attributes) -> None:
        try:
            self._collector.child(_labels(attributes)).inc(value)
        except Exception as e:
            logger.warning("prometheus_up_down_counter_add_failed", error=str(e))


class _GaugeSamples(AsyncMeasurement):
    def __init__(self) -> None:
        self.samples: List[Tuple[Dict[str, str], float]] = []

    def record(self, value: float, attributes: Attributes) -> None:
        self.samples.append((_labels(attributes), float(value)))


class PrometheusGaugeHandle(GaugeHandle, Collector):
    """Custom collector invoking the gauge callback at scrape time."""

    def __init__(
        self,
        name: str,
        callback: GaugeCallback,
        description: str,
        registry: CollectorRegistry,
    ) -> None:
        self._name = name
        self._callback = callback
        self._description = description or name
        self._registry = registry
        self._registered = True
        registry.register(self)

    def collect(self):
        measurement = _GaugeSamples()
        try:
            self._callback(measurement)
        except Exception as e:
            logger.warning("prometheus_gauge_callback_failed", gauge=self._name, error=str(e))
            return []

        labelnames = sorted({k for labels, _ in measurement.samples for k in labels})
        family = GaugeMetricFamily(self._name, self._description, labels=labelnames)
        for labels, value in measurement.samples:
            family.add_metric([labels.get(k, "") for k in labelnames], value)
        return [family]

    def stop(self) -> None:
        if self._registered:
            self._registry.unregister(self)
            self._registered = False


class PrometheusMeter(Meter):
    """Meter creating Prometheus collectors on a registry.

    Instruments are cached by name per registry, so repeated
    ``create_histogram`` calls for the same metric share one collector
    across calls, meters and providers.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self._registry = registry

    def _collector(self, kind: str, name: str, factory) -> _LazyCollector:
        key = (kind, name)
        with _REGISTRY_LOCK:
            collectors = _REGISTRY_COLLECTORS.setdefault(self._registry, {})
            collector = collectors.get(key)
            if collector is None:
                collector = _LazyCollector(factory)
                collectors[key] = collector
            return collector

    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        return PrometheusGaugeHandle(sanitize_name(name), callback, description, self._registry)

    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        prom_name = sanitize_name(name)
        collector = self._collector(
            "up_down_counter",
            prom_name,
            lambda labelnames: Gauge(
                prom_name, description or name, labelnames, registry=self._registry
            ),
        )
        return PrometheusUpDownCounterAdapter(collector)

    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        prom_name = sanitize_name(name)
        collector = self._collector(
            "counter",
            prom_name,
            lambda labelnames: Counter(
                prom_name, description or name, labelnames, registry=self._registry
            ),
        )
        return PrometheusCounterAdapter(collector)

    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        prom_name = sanitize_name(name)
        buckets = DURATION_BUCKETS_MS if units == "ms" else PromHistogram.DEFAULT_BUCKETS
        collector = self._collector(
            "histogram",
            prom_name,
            lambda labelnames: PromHistogram(
                prom_name,
                description or name,
                labelnames,
                buckets=buckets,
                registry=self._registry,
            ),
        )
        return PrometheusHistogramAdapter(collector)


class PrometheusMeterProvider(MeterProvider):
    """Meter provider sharing one Prometheus meter across scopes.

    Prometheus has no notion of instrumentation scope; the scope is
    carried by the ``rpc.service`` attribute instead.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry
        self._meter = PrometheusMeter(registry)

    def get_meter(self, scope: str, attributes: Optional[Attributes] = None) -> Meter:
        return self._meter


def create_prometheus_provider(registry: CollectorRegistry = REGISTRY) -> TelemetryProvider:
    """Create a telemetry provider exporting metrics to Prometheus.

    Args:
        registry: Prometheus registry to use

    Returns:
        TelemetryProvider with Prometheus metrics and no tracing
    """
    return TelemetryProvider(NoopTracerProvider(), PrometheusMeterProvider(registry))


def get_metrics_handler(registry: CollectorRegistry = REGISTRY) -> Callable[[], bytes]:
    """Get metrics handler for an HTTP endpoint.

    Returns:
        Function that generates Prometheus metrics output
    """

    def metrics_handler() -> bytes:
        return generate_latest(registry)

    return metrics_handler
