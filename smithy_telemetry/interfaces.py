"""Vendor-neutral telemetry capability interfaces.

Generated client code only ever talks to these abstractions. A backend
(no-op, OpenTelemetry, Prometheus, ...) plugs in by implementing them.
Recording methods are best-effort: implementations must not raise into
the caller.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Mapping, Optional

Attributes = Mapping[str, str]


class Histogram(ABC):
    """Records a distribution of values, e.g. call durations."""

    @abstractmethod
    def record(self, value: float, attributes: Attributes) -> None:
        """Record one observation tagged with attributes."""


class UpDownCounter(ABC):
    """A counter that may be adjusted by signed amounts."""

    @abstractmethod
    def add(self, value: int, attributes: Attributes) -> None:
        """Adjust the counter by a signed amount."""


class MonotonicCounter(ABC):
    """A counter that only increases."""

    @abstractmethod
    def add(self, value: int, attributes: Attributes) -> None:
        """Increase the counter."""


class AsyncMeasurement(ABC):
    """Sink handed to gauge callbacks during collection."""

    @abstractmethod
    def record(self, value: float, attributes: Attributes) -> None:
        """Report the current value of the gauge."""


class GaugeHandle(ABC):
    """Handle to an asynchronous gauge registration."""

    @abstractmethod
    def stop(self) -> None:
        """Stop invoking the gauge callback."""


GaugeCallback = Callable[[AsyncMeasurement], None]


class Meter(ABC):
    """Factory for metric instruments within one scope."""

    @abstractmethod
    def create_gauge(
        self,
        name: str,
        callback: GaugeCallback,
        units: str = "",
        description: str = "",
    ) -> GaugeHandle:
        """Register an asynchronous gauge driven by callback."""

    @abstractmethod
    def create_up_down_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> UpDownCounter:
        """Create an up/down counter."""

    @abstractmethod
    def create_counter(
        self, name: str, units: str = "", description: str = ""
    ) -> MonotonicCounter:
        """Create a monotonic counter."""

    @abstractmethod
    def create_histogram(
        self, name: str, units: str = "", description: str = ""
    ) -> Histogram:
        """Create a histogram."""


class MeterProvider(ABC):
    """Entry point to obtain meters."""

    @abstractmethod
    def get_meter(self, scope: str, attributes: Optional[Attributes] = None) -> Meter:
        """Get a meter bound to scope.

        Args:
            scope: Logical scope, typically the service client name
            attributes: Static attributes for the meter

        Returns:
            Meter instance, possibly shared with other callers
        """


class TraceSpanStatus(str, Enum):
    """Status of a span."""

    UNSET = "unset"
    OK = "ok"
    ERROR = "error"


class SpanKind(str, Enum):
    """Role of the span in the trace."""

    INTERNAL = "internal"
    CLIENT = "client"
    SERVER = "server"


class TraceSpan(ABC):
    """The basic unit of a trace.

    Represents a period of time during which events happen. Spans may be
    used as context managers; leaving the block ends the span.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def emit_event(self, name: str, attributes: Optional[Attributes] = None) -> None:
        """Attach a timestamped event to the span."""

    @abstractmethod
    def set_attribute(self, key: str, value: str) -> None:
        """Set one attribute on the span."""

    @abstractmethod
    def set_status(self, status: TraceSpanStatus) -> None:
        """Set the span status."""

    @abstractmethod
    def end(self) -> None:
        """End the span. Calling end twice has no further effect."""

    def __enter__(self) -> "TraceSpan":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            self.set_status(TraceSpanStatus.ERROR)
        self.end()


class Tracer(ABC):
    """Creates spans."""

    @abstractmethod
    def create_span(
        self,
        name: str,
        attributes: Optional[Attributes] = None,
        span_kind: SpanKind = SpanKind.INTERNAL,
    ) -> TraceSpan:
        """Start a new span."""


class TracerProvider(ABC):
    """Entry point to obtain tracers."""

    @abstractmethod
    def get_tracer(self, scope: str, attributes: Optional[Attributes] = None) -> Tracer:
        """Get a tracer bound to scope and static attributes.

        The returned tracer is shared: providers may cache and reuse
        instances, so callers must not assume exclusive ownership.

        Args:
            scope: Logical scope, typically the service client name
            attributes: Static attributes for the tracer

        Returns:
            Tracer instance
        """


def copy_attributes(attributes: Optional[Attributes]) -> Dict[str, str]:
    """Return a plain dict copy of attributes (empty for None)."""
    return dict(attributes) if attributes else {}
