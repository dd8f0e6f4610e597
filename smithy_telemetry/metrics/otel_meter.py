"""OpenTelemetry-backed implementations of the meter interfaces.

Each adapter wraps an instrument obtained from an ``opentelemetry``
meter. Recording failures are logged and swallowed.
"""

import threading
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

import structlog
from opentelemetry import metrics as otel_metrics
from opentelemetry.metrics import CallbackOptions, Observation

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

logger = structlog.get_logger(__name__)


class OtelHistogramAdapter(Histogram):
    def __init__(self, otel_histogram: otel_metrics.Histogram) -> None:
        self._histogram = otel_histogram

    def record(self, value: float, attributes: Attributes) -> None:
        try:
            self._histogram.record(value, attributes=dict(attributes))
        except Exception as e:
            logger.warning("otel_histogram_record_failed", error=str(e))


class OtelCounterAdapter(MonotonicCounter):
    def __init__(self, otel_counter: otel_metrics.Counter) -> None:
        self._counter = otel_counter

    def add(self, value: int, attributes: Attributes) -> None:
        try:
            self._counter.add(value, attributes=dict(attributes))
        except Exception as e:
            logger.warning("otel_counter_add_failed", error=str(e))


class OtelUpDownCounterAdapter(UpDownCounter):
    def __init__(self, otel_counter: otel_metrics.UpDownCounter) -> None:
        self._counter = otel_counter

    def add(self, value: int, attributes: Attributes) -> None:
        try:
            self._counter.add(value, attributes=dict(attributes))
        except Exception as e:
            logger.warning("otel_up_down_counter_add_failed", error=str(e))


class OtelObserverAdapter(AsyncMeasurement):
    """Collects gauge values reported during one collection cycle."""

    def __init__(self) -> None:
        self.observations: List[Observation] = []

    def record(self, value: float, attributes: Attributes) -> None:
        self.observations.append(Observation(value, dict(attributes)))


class OtelGaugeAdapter(GaugeHandle):
    """Bridges a gauge callback to an OpenTelemetry observable gauge.

    OpenTelemetry has no way to unregister a callback, so ``stop`` turns
    the bridge into one that reports nothing.
    """

    def __init__(self, callback: GaugeCallback) -> None:
        self._callback = callback
        self._stopped = threading.Event()

    def observe(self, options: CallbackOptions) -> Iterable[Observation]:
        if self._stopped.is_set():
            return []
        observer = OtelObserverAdapter()
        try:
            self._callback(observer)
        except Exception as e:
            logger.warning("otel_gauge_callback_failed", error=str(e))
            return []
        return observer.observations

    def stop(self) -> None:
        self._stopped.set()


class OtelMeterAdapter(Meter):
    def __init__(self, otel_meter: otel_metrics.Meter) -> None:
        self._meter = otel_meter

    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        handle = OtelGaugeAdapter(callback)
        self._meter.create_observable_gauge(
            name, callbacks=[handle.observe], unit=units, description=description
        )
        return handle

    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        return OtelUpDownCounterAdapter(
            self._meter.create_up_down_counter(name, unit=units, description=description)
        )

    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        return OtelCounterAdapter(
            self._meter.create_counter(name, unit=units, description=description)
        )

    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        return OtelHistogramAdapter(
            self._meter.create_histogram(name, unit=units, description=description)
        )


class OtelMeterProviderAdapter(MeterProvider):
    """Hands out cached meter adapters over an OpenTelemetry meter provider."""

    def __init__(self, otel_provider: otel_metrics.MeterProvider) -> None:
        self.otel_provider = otel_provider
        self._meters: Dict[Tuple[str, FrozenSet], OtelMeterAdapter] = {}
        self._lock = threading.Lock()

    def get_meter(self, scope: str, attributes: Optional[Attributes] = None) -> Meter:
        key = (scope, frozenset((attributes or {}).items()))
        with self._lock:
            meter = self._meters.get(key)
            if meter is None:
                meter = OtelMeterAdapter(
                    self.otel_provider.get_meter(scope, attributes=dict(attributes or {}) or None)
                )
                self._meters[key] = meter
            return meter
