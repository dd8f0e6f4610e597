"""Declarative operation tables.

Every service client is generated from a ``ServiceSpec``: one
``OperationSpec`` per API operation, carrying everything that varies
between operations (name, HTTP verb, required members, path template).
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Mapping, Tuple

from botocore import xform_name

_PATH_FIELD = re.compile(r"\{([A-Za-z0-9]+)\}")


class Protocol(str, Enum):
    AWS_JSON_1_1 = "awsJson1_1"
    REST_JSON_1 = "restJson1"


class MemberCase(str, Enum):
    """Casing of top-level members on the wire."""

    PASCAL = "pascal"
    CAMEL = "camel"


class SpanPolicy(str, Enum):
    """Which operations open a tracing span."""

    ALL = "all"
    PARAMETERLESS = "parameterless"
    NONE = "none"


@dataclass(frozen=True)
class OperationSpec:
    """One API operation.

    Attributes:
        name: Operation name, e.g. "DeleteChannel"
        http_method: Fixed HTTP verb
        required: Members that must be set before dispatch, in check order
        path: Request path; ``{Member}`` placeholders are filled from the request
        query: Request members sent in the query string, mapped to wire names
        takes_request: False for operations invoked without a request
    """

    name: str
    http_method: str = "POST"
    required: Tuple[str, ...] = ()
    path: str = "/"
    query: Mapping[str, str] = field(default_factory=dict)
    takes_request: bool = True

    @property
    def python_name(self) -> str:
        return xform_name(self.name)

    @property
    def path_fields(self) -> Tuple[str, ...]:
        return tuple(_PATH_FIELD.findall(self.path))

    @property
    def declared_members(self) -> Tuple[str, ...]:
        """Members the generated request model declares explicitly."""
        members = list(self.required)
        for name in self.path_fields + tuple(self.query):
            if name not in members:
                members.append(name)
        return tuple(members)

    def path_parts(self) -> Iterator[Tuple[bool, str]]:
        """Split the path into (is_member, text) parts in order."""
        position = 0
        for match in _PATH_FIELD.finditer(self.path):
            if match.start() > position:
                yield False, self.path[position:match.start()]
            yield True, match.group(1)
            position = match.end()
        if position < len(self.path):
            yield False, self.path[position:]


@dataclass(frozen=True)
class ServiceSpec:
    """Everything needed to generate one service client.

    Attributes:
        service_name: SigV4 signing name, e.g. "iotanalytics"
        client_name: Human readable client name used in telemetry
        endpoint_prefix: Hostname prefix of the regional endpoint
        protocol: Wire protocol
        target_prefix: ``X-Amz-Target`` prefix for awsJson1_1 services
        member_case: Casing of top-level members on the wire
        span_policy: Which operations open a tracing span
        operations: Operation table
    """

    service_name: str
    client_name: str
    endpoint_prefix: str
    protocol: Protocol
    operations: Tuple[OperationSpec, ...]
    target_prefix: str = ""
    member_case: MemberCase = MemberCase.PASCAL
    span_policy: SpanPolicy = SpanPolicy.ALL

    def __post_init__(self) -> None:
        names = [op.name for op in self.operations]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate operation in {self.client_name} table")

    @property
    def operations_by_name(self) -> Dict[str, OperationSpec]:
        return {op.name: op for op in self.operations}

    def operation(self, name: str) -> OperationSpec:
        try:
            return self.operations_by_name[name]
        except KeyError:
            raise ValueError(f"{self.client_name} has no operation {name!r}") from None

    def is_traced(self, operation: OperationSpec) -> bool:
        if self.span_policy is SpanPolicy.ALL:
            return True
        if self.span_policy is SpanPolicy.PARAMETERLESS:
            return not operation.takes_request
        return False


def json_operations(*names: str, parameterless: Tuple[str, ...] = ()) -> Tuple[OperationSpec, ...]:
    """Build an awsJson1_1 table: every operation is ``POST /``."""
    return tuple(
        OperationSpec(name=name, takes_request=name not in parameterless) for name in names
    )
