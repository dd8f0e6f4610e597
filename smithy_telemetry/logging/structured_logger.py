"""structlog setup shared by the service clients.

Every operation call runs inside ``operation_log_context``, so entries
emitted anywhere below ``execute`` carry the client and operation names.
Header and credential values never reach the renderer: ``redact_secrets``
masks them before rendering.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List

import structlog
from opentelemetry import trace
from structlog.types import EventDict, Processor

REDACTED = "***"

SENSITIVE_KEYS = frozenset(
    {
        "authorization",
        "x-amz-security-token",
        "aws_secret_access_key",
        "secret_access_key",
        "session_token",
        "token",
    }
)


def redact_secrets(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask sensitive values, including those nested one level in dicts (e.g. headers)."""
    for key, value in list(event_dict.items()):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = {
                k: REDACTED if str(k).lower() in SENSITIVE_KEYS else v for k, v in value.items()
            }
    return event_dict


def add_span_ids(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Attach the ids of the active OpenTelemetry span, if one is recording."""
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = trace.format_trace_id(span_context.trace_id)
        event_dict["span_id"] = trace.format_span_id(span_context.span_id)
    return event_dict


def build_processors(json_logs: bool = True) -> List[Processor]:
    renderer: Processor = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        add_span_ids,
        redact_secrets,
        renderer,
    ]


def configure_logging(log_level: str = "INFO", json_logs: bool = True, **static_context: Any) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        log_level: Level name for the root logger
        json_logs: JSON lines when True, console rendering otherwise
        **static_context: Keys bound to every subsequent entry, e.g. ``region="us-west-2"``
    """
    structlog.configure(
        processors=build_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level.upper())

    if static_context:
        structlog.contextvars.bind_contextvars(**static_context)


@contextmanager
def operation_log_context(client: str, operation: str) -> Iterator[None]:
    """Bind ``client`` and ``operation`` for the duration of one call."""
    with structlog.contextvars.bound_contextvars(client=client, operation=operation):
        yield
