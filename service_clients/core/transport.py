"""HTTP transport.

``HttpTransport`` is the injectable collaborator that sends a signed,
prepared request exactly once. ``Urllib3Transport`` wraps botocore's
pooled urllib3 session.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

import structlog
from botocore.awsrequest import AWSPreparedRequest
from botocore.exceptions import ConnectionError as BotoConnectionError
from botocore.exceptions import HTTPClientError
from botocore.httpsession import URLLib3Session

logger = structlog.get_logger(__name__)


@dataclass
class HttpResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    # Transport measurements keyed by HTTP client metric name, e.g. "Throughput"
    metrics: Dict[str, float] = field(default_factory=dict)


class TransportError(Exception):
    """Raised by a transport when no HTTP response could be obtained."""


class HttpTransport(ABC):
    @abstractmethod
    def send(self, request: AWSPreparedRequest) -> HttpResponse:
        """Send request once; raise TransportError on connection failures."""

    def close(self) -> None:
        """Release pooled connections."""


class Urllib3Transport(HttpTransport):
    """Transport over ``botocore.httpsession.URLLib3Session``."""

    def __init__(
        self,
        connect_timeout_ms: int = 1000,
        request_timeout_ms: int = 3000,
        max_connections: int = 25,
        verify_ssl: bool = True,
        proxies: Optional[Dict[str, str]] = None,
    ) -> None:
        self._session = URLLib3Session(
            verify=verify_ssl,
            proxies=proxies,
            timeout=(connect_timeout_ms / 1000.0, request_timeout_ms / 1000.0),
            max_pool_connections=max_connections,
        )

    @classmethod
    def from_config(cls, config) -> "Urllib3Transport":
        return cls(
            connect_timeout_ms=config.connect_timeout_ms,
            request_timeout_ms=config.request_timeout_ms,
            max_connections=config.max_connections,
            verify_ssl=config.verify_ssl,
        )

    def send(self, request: AWSPreparedRequest) -> HttpResponse:
        started = time.perf_counter()
        try:
            response = self._session.send(request)
        except (BotoConnectionError, HTTPClientError) as e:
            logger.warning("http_request_failed", method=request.method, url=request.url, error=str(e))
            raise TransportError(str(e)) from e

        body = response.content
        elapsed = time.perf_counter() - started
        metrics = {"Throughput": len(body) / elapsed} if elapsed > 0 else {}
        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            body=body,
            metrics=metrics,
        )

    def close(self) -> None:
        self._session.close()
