"""Configuration management for the service clients.

Uses Pydantic Settings for environment-based configuration. Client
settings read the standard ``AWS_*`` variables, telemetry settings the
standard ``OTEL_*`` ones.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smithy_telemetry import TelemetryProvider, create_noop_provider
from smithy_telemetry.logging import configure_logging


class ClientConfiguration(BaseSettings):
    """Per-client configuration, immutable once a client holds it."""

    region: str = Field(default="us-east-1", description="AWS region")
    endpoint_url: Optional[str] = Field(default=None, description="Custom endpoint URL")
    use_fips_endpoint: bool = Field(default=False, description="Use FIPS endpoints")
    use_dualstack_endpoint: bool = Field(default=False, description="Use dual-stack endpoints")
    connect_timeout_ms: int = Field(default=1000, description="Connect timeout", gt=0)
    request_timeout_ms: int = Field(default=3000, description="Read timeout", gt=0)
    max_connections: int = Field(default=25, description="Max pooled connections", gt=0)
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    user_agent: str = Field(default="aws-service-clients/1.0.0", description="User-Agent header")
    executor_max_workers: int = Field(
        default=8, description="Worker threads for *_callable/*_async calls", gt=0
    )

    model_config = SettingsConfigDict(env_prefix="AWS_", frozen=True, extra="ignore")

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Normalize region casing and whitespace."""
        return v.strip().lower()


class TelemetryConfig(BaseSettings):
    """Telemetry backend selection."""

    backend: str = Field(default="noop", description="Telemetry backend (noop/otel/prometheus)")
    service_name: str = Field(default="aws-service-clients", description="service.name resource")
    exporter_otlp_endpoint: Optional[str] = Field(default=None, description="OTLP endpoint")
    sdk_disabled: bool = Field(default=False, description="Disable telemetry entirely")

    model_config = SettingsConfigDict(env_prefix="OTEL_", extra="ignore")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate backend is one of the allowed values."""
        allowed = ["noop", "otel", "prometheus"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"backend must be one of {allowed}, got: {v}")
        return v_lower


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configurations
    client: ClientConfiguration = Field(default_factory=ClientConfiguration)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=True, description="Render logs as JSON")

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_CLIENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got: {v}")
        return v_upper


@lru_cache()
def get_config() -> Config:
    """Get cached configuration instance.

    Returns:
        Config loaded from the environment once per process
    """
    return Config()


def clear_config_cache() -> None:
    """Clear the configuration cache (useful for testing)."""
    get_config.cache_clear()


def build_telemetry_provider(config: TelemetryConfig) -> TelemetryProvider:
    """Build the telemetry provider selected by config.

    Args:
        config: Telemetry configuration

    Returns:
        A new TelemetryProvider
    """
    if config.sdk_disabled or config.backend == "noop":
        return create_noop_provider()

    if config.backend == "prometheus":
        from smithy_telemetry.metrics import create_prometheus_provider

        return create_prometheus_provider()

    from smithy_telemetry.tracing import OtelTelemetryProvider

    return OtelTelemetryProvider.create_otel_provider(
        service_name=config.service_name,
        otlp_endpoint=config.exporter_otlp_endpoint,
    )


def setup_logging(config: Optional[Config] = None) -> None:
    """Configure structlog from ``log_level`` and ``json_logs``, tagging entries with the region."""
    config = config or get_config()
    configure_logging(config.log_level, config.json_logs, region=config.client.region)
