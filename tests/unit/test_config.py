"""
Unit tests for environment-based configuration.
"""

import pytest
from pydantic import ValidationError

from service_clients.config import (
    ClientConfiguration,
    Config,
    TelemetryConfig,
    build_telemetry_provider,
    clear_config_cache,
    get_config,
)
from smithy_telemetry.metrics import PrometheusMeterProvider
from smithy_telemetry.noop import NoopMeterProvider, NoopTracerProvider


class TestClientConfiguration:
    """Test per-client settings"""

    def test_defaults(self, monkeypatch):
        for name in ("AWS_REGION", "AWS_ENDPOINT_URL", "AWS_CONNECT_TIMEOUT_MS", "AWS_REQUEST_TIMEOUT_MS"):
            monkeypatch.delenv(name, raising=False)

        config = ClientConfiguration()

        assert config.region == "us-east-1"
        assert config.endpoint_url is None
        assert config.connect_timeout_ms == 1000
        assert config.request_timeout_ms == 3000

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "EU-West-1")
        monkeypatch.setenv("AWS_USE_FIPS_ENDPOINT", "true")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")

        config = ClientConfiguration()

        assert config.region == "eu-west-1"
        assert config.use_fips_endpoint is True
        assert config.endpoint_url == "http://localhost:4566"

    def test_frozen(self):
        config = ClientConfiguration(region="us-west-2")

        with pytest.raises(ValidationError):
            config.region = "eu-west-1"

    def test_positive_timeouts(self):
        with pytest.raises(ValidationError):
            ClientConfiguration(connect_timeout_ms=0)


class TestTelemetryConfig:
    """Test telemetry backend selection"""

    def test_backend_from_environment(self, monkeypatch):
        monkeypatch.setenv("OTEL_BACKEND", "Prometheus")

        assert TelemetryConfig().backend == "prometheus"

    def test_invalid_backend(self):
        with pytest.raises(ValidationError):
            TelemetryConfig(backend="statsd")

    def test_noop_provider(self):
        provider = build_telemetry_provider(TelemetryConfig(backend="noop"))

        assert isinstance(provider.tracer_provider, NoopTracerProvider)
        assert isinstance(provider.meter_provider, NoopMeterProvider)

    def test_sdk_disabled_wins(self):
        provider = build_telemetry_provider(TelemetryConfig(backend="prometheus", sdk_disabled=True))

        assert isinstance(provider.meter_provider, NoopMeterProvider)

    def test_prometheus_provider(self):
        provider = build_telemetry_provider(TelemetryConfig(backend="prometheus"))

        assert isinstance(provider.meter_provider, PrometheusMeterProvider)


class TestConfig:
    """Test the top-level configuration"""

    def test_log_level_normalized(self):
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Config(log_level="verbose")

    def test_get_config_is_cached(self, monkeypatch):
        clear_config_cache()
        monkeypatch.setenv("SERVICE_CLIENTS_LOG_LEVEL", "warning")

        first = get_config()

        assert first is get_config()
        assert first.log_level == "WARNING"
        clear_config_cache()
