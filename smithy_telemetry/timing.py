"""Timing helper that reports a call's duration to a histogram."""

import time
from typing import Callable, Mapping, TypeVar

from .interfaces import Attributes, Meter

T = TypeVar("T")

SMITHY_CLIENT_DURATION = "smithy.client.duration"
SMITHY_RESOLVE_ENDPOINT_DURATION = "smithy.client.resolve_endpoint_duration"

SMITHY_METRICS_DNS_DURATION = "smithy.client.http.dns_duration"
SMITHY_METRICS_CONNECT_DURATION = "smithy.client.http.connect_duration"
SMITHY_METRICS_SSL_DURATION = "smithy.client.http.ssl_duration"
SMITHY_METRICS_THROUGHPUT = "smithy.client.http.throughput"


def make_call_with_timing(
    func: Callable[[], T],
    metric_name: str,
    meter: Meter,
    attributes: Attributes,
    description: str = "",
) -> T:
    """Call func and record its wall time in milliseconds.

    The sample is recorded only when func returns; exceptions propagate
    without a sample.

    Args:
        func: Zero-argument callable to time
        metric_name: Histogram name, e.g. "smithy.client.duration"
        meter: Meter creating the histogram
        attributes: Attributes attached to the sample
        description: Histogram description

    Returns:
        Whatever func returned
    """
    before = time.perf_counter()
    value = func()
    duration_ms = (time.perf_counter() - before) * 1000.0

    histogram = meter.create_histogram(metric_name, "ms", description)
    histogram.record(duration_ms, dict(attributes))
    return value


# Transport-level metric names, as reported by an HTTP client, mapped to
# the smithy histogram and its unit.
CORE_HTTP_METRICS = {
    "DnsLatency": (SMITHY_METRICS_DNS_DURATION, "ms"),
    "ConnectLatency": (SMITHY_METRICS_CONNECT_DURATION, "ms"),
    "SslLatency": (SMITHY_METRICS_SSL_DURATION, "ms"),
    "Throughput": (SMITHY_METRICS_THROUGHPUT, "bytes/s"),
}


def emit_core_http_metrics(
    metrics: Mapping[str, float],
    meter: Meter,
    attributes: Attributes,
    description: str = "",
) -> None:
    """Record each known transport metric to its smithy histogram; unknown names are skipped."""
    for name, value in metrics.items():
        target = CORE_HTTP_METRICS.get(name)
        if target is None:
            continue
        metric_name, units = target
        meter.create_histogram(metric_name, units, description).record(value, dict(attributes))
