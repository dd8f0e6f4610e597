"""Endpoint resolution.

``EndpointProvider`` is the injectable collaborator every client
operation calls before dispatch. ``DefaultEndpointProvider`` implements
the regional rules shared by the bundled services: custom endpoint,
FIPS and dual-stack variants, and the ``aws``/``aws-cn`` partitions.
"""

import re
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlsplit, urlunsplit

import structlog
from botocore.utils import percent_encode

from .outcome import Outcome, endpoint_resolution_failure

logger = structlog.get_logger(__name__)

_HOST_LABEL = re.compile(r"^[a-z0-9][a-z0-9-]{0,62}$")


class ParameterOrigin(str, Enum):
    BUILT_IN = "built_in"
    CLIENT_CONTEXT = "client_context"
    OPERATION_CONTEXT = "operation_context"


@dataclass(frozen=True)
class EndpointParameter:
    name: str
    value: Any
    origin: ParameterOrigin = ParameterOrigin.OPERATION_CONTEXT


@dataclass
class ResolvedEndpoint:
    """A resolved endpoint that operations extend with their path.

    Each operation receives its own instance, so appending path segments
    never leaks between calls.
    """

    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    signing_region: Optional[str] = None
    _segments: List[str] = field(default_factory=list, init=False, repr=False)

    def add_path_segments(self, path: str) -> None:
        """Append a literal path such as "/pipelines/"."""
        self._segments.extend(part for part in path.split("/") if part)

    def add_path_segment(self, value: Any) -> None:
        """Append one value as a single percent-encoded segment."""
        self._segments.append(percent_encode(str(value)))

    def copy(self) -> "ResolvedEndpoint":
        """Independent copy, keeping any path segments already added."""
        endpoint = ResolvedEndpoint(self.url, dict(self.headers), self.signing_region)
        endpoint._segments = list(self._segments)
        return endpoint

    @property
    def full_url(self) -> str:
        scheme, netloc, base_path, _, _ = urlsplit(self.url)
        parts = [part for part in base_path.split("/") if part] + self._segments
        return urlunsplit((scheme, netloc, "/" + "/".join(parts), "", ""))


class EndpointProvider(ABC):
    """Computes the endpoint for an operation."""

    @abstractmethod
    def init_built_in_parameters(self, config) -> None:
        """Seed built-in parameters (region, FIPS, ...) from client configuration."""

    @abstractmethod
    def override_endpoint(self, endpoint: str) -> None:
        """Force every resolution to use endpoint."""

    @abstractmethod
    def resolve_endpoint(self, params: Sequence[EndpointParameter]) -> Outcome[ResolvedEndpoint]:
        """Resolve an endpoint; failures are returned, not raised."""


class DefaultEndpointProvider(EndpointProvider):
    """Regional endpoint rules for services without custom routing.

    Args:
        endpoint_prefix: Hostname prefix, e.g. "iotanalytics"
        global_region: For global services in the ``aws`` partition, the
            region every request is routed to and signed for
    """

    def __init__(self, endpoint_prefix: str, global_region: Optional[str] = None) -> None:
        self.endpoint_prefix = endpoint_prefix
        self.global_region = global_region
        self._built_ins: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def init_built_in_parameters(self, config) -> None:
        with self._lock:
            self._built_ins = {
                "Region": config.region,
                "UseFIPS": config.use_fips_endpoint,
                "UseDualStack": config.use_dualstack_endpoint,
            }
            if config.endpoint_url:
                self._built_ins["Endpoint"] = config.endpoint_url

    def override_endpoint(self, endpoint: str) -> None:
        with self._lock:
            self._built_ins["Endpoint"] = endpoint

    def built_in_parameters(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._built_ins)

    def resolve_endpoint(self, params: Sequence[EndpointParameter]) -> Outcome[ResolvedEndpoint]:
        values = self.built_in_parameters()
        values.update({param.name: param.value for param in params})

        region = values.get("Region")
        use_fips = bool(values.get("UseFIPS"))
        use_dual_stack = bool(values.get("UseDualStack"))
        endpoint = values.get("Endpoint")

        if endpoint:
            if use_fips:
                return self._fail("Invalid Configuration: FIPS and custom endpoint are not supported")
            if use_dual_stack:
                return self._fail(
                    "Invalid Configuration: Dualstack and custom endpoint are not supported"
                )
            return Outcome.success(ResolvedEndpoint(url=str(endpoint).rstrip("/")))

        if not region:
            return self._fail("Invalid Configuration: Missing Region")
        if not _HOST_LABEL.match(region):
            return self._fail(f"Invalid Configuration: Region {region!r} is not a valid host label")

        china = region.startswith("cn-")
        if use_dual_stack:
            dns_suffix = "api.amazonwebservices.com.cn" if china else "api.aws"
        else:
            dns_suffix = "amazonaws.com.cn" if china else "amazonaws.com"

        host_prefix = f"{self.endpoint_prefix}-fips" if use_fips else self.endpoint_prefix

        signing_region = None
        if self.global_region and not china and not region.startswith("us-gov-"):
            region = signing_region = self.global_region

        return Outcome.success(
            ResolvedEndpoint(
                url=f"https://{host_prefix}.{region}.{dns_suffix}",
                signing_region=signing_region,
            )
        )

    def _fail(self, message: str) -> Outcome[ResolvedEndpoint]:
        logger.debug("endpoint_resolution_failed", prefix=self.endpoint_prefix, reason=message)
        return Outcome.failure(endpoint_resolution_failure(message))
