"""Telemetry provider bundling a tracer provider and a meter provider."""

import threading
from typing import Callable, Optional

from .interfaces import Attributes, Meter, MeterProvider, Tracer, TracerProvider


class TelemetryProvider:
    """Pair of tracer and meter providers plus a one-time init hook.

    Clients hold a shared reference to one provider and call ``run_init``
    during construction; the init hook runs at most once per provider.
    """

    def __init__(
        self,
        tracer_provider: TracerProvider,
        meter_provider: MeterProvider,
        init: Optional[Callable[[], None]] = None,
    ) -> None:
        self._tracer_provider = tracer_provider
        self._meter_provider = meter_provider
        self._init = init
        self._init_lock = threading.Lock()
        self._initialized = False

    @property
    def tracer_provider(self) -> TracerProvider:
        return self._tracer_provider

    @property
    def meter_provider(self) -> MeterProvider:
        return self._meter_provider

    def get_tracer(self, scope: str, attributes: Optional[Attributes] = None) -> Tracer:
        return self._tracer_provider.get_tracer(scope, attributes or {})

    def get_meter(self, scope: str, attributes: Optional[Attributes] = None) -> Meter:
        return self._meter_provider.get_meter(scope, attributes or {})

    def run_init(self) -> None:
        """Run the init hook once, even with concurrent callers."""
        with self._init_lock:
            if self._initialized:
                return
            self._initialized = True
            if self._init is not None:
                self._init()
