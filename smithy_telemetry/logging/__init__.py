"""Structured logging for the service clients."""

from .structured_logger import (
    add_span_ids,
    build_processors,
    configure_logging,
    operation_log_context,
    redact_secrets,
)

__all__ = [
    "add_span_ids",
    "build_processors",
    "configure_logging",
    "operation_log_context",
    "redact_secrets",
]
