"""Wire protocols: request serialization and response unmarshalling.

Two protocols cover the bundled services:

- awsJson1_1: ``POST /`` with an ``X-Amz-Target`` header naming the operation
- restJson1: HTTP binding per operation (path, query string, JSON body)
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

import structlog
from botocore.awsrequest import AWSRequest

from .endpoint import ResolvedEndpoint
from .models import ServiceRequest, ServiceResult
from .operations import MemberCase, OperationSpec, Protocol, ServiceSpec
from .outcome import AWSError, ErrorType, Outcome
from .transport import HttpResponse

logger = structlog.get_logger(__name__)

RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}

THROTTLING_ERROR_CODES = {
    "Throttling",
    "ThrottlingException",
    "ThrottledException",
    "RequestThrottledException",
    "TooManyRequestsException",
    "ProvisionedThroughputExceededException",
    "TransactionInProgressException",
    "RequestLimitExceeded",
    "BandwidthLimitExceeded",
    "LimitExceededException",
    "RequestThrottled",
    "SlowDown",
    "PriorRequestNotComplete",
    "EC2ThrottledException",
}


def to_wire_name(member: str, case: MemberCase) -> str:
    if case is MemberCase.CAMEL and member:
        return member[0].lower() + member[1:]
    return member


def _wire_members(members: Mapping[str, Any], case: MemberCase) -> Dict[str, Any]:
    # Only top-level names follow the service casing; nested values are
    # sent as given.
    return {to_wire_name(name, case): value for name, value in members.items()}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestSerializer:
    """Builds the unsigned HTTP request of one operation call."""

    def __init__(self, service: ServiceSpec, user_agent: str) -> None:
        self.service = service
        self.user_agent = user_agent

    def serialize(
        self,
        operation: OperationSpec,
        request: Optional[ServiceRequest],
        endpoint: ResolvedEndpoint,
    ) -> AWSRequest:
        members = request.members() if request is not None else {}
        headers = {"User-Agent": self.user_agent}
        headers.update(endpoint.headers)

        if self.service.protocol is Protocol.AWS_JSON_1_1:
            return self._serialize_json(operation, members, endpoint, headers)
        return self._serialize_rest_json(operation, request, members, endpoint, headers)

    def _serialize_json(
        self,
        operation: OperationSpec,
        members: Dict[str, Any],
        endpoint: ResolvedEndpoint,
        headers: Dict[str, str],
    ) -> AWSRequest:
        headers["Content-Type"] = "application/x-amz-json-1.1"
        headers["X-Amz-Target"] = f"{self.service.target_prefix}.{operation.name}"
        body = json.dumps(_wire_members(members, self.service.member_case))
        return AWSRequest(
            method=operation.http_method,
            url=endpoint.full_url,
            data=body.encode("utf-8"),
            headers=headers,
        )

    def _serialize_rest_json(
        self,
        operation: OperationSpec,
        request: Optional[ServiceRequest],
        members: Dict[str, Any],
        endpoint: ResolvedEndpoint,
        headers: Dict[str, str],
    ) -> AWSRequest:
        # The path was already appended to the endpoint by the client.
        params: List[Tuple[str, str]] = []
        for member, wire_name in operation.query.items():
            if request is not None and request.has_been_set(member):
                value = request.get_member(member)
                values = value if isinstance(value, (list, tuple)) else [value]
                params.extend((wire_name, _query_value(item)) for item in values)

        bound = set(operation.path_fields) | set(operation.query)
        body_members = {k: v for k, v in members.items() if k not in bound}

        data = b""
        if body_members or operation.http_method in ("POST", "PUT"):
            headers["Content-Type"] = "application/json"
            data = json.dumps(_wire_members(body_members, self.service.member_case)).encode("utf-8")

        return AWSRequest(
            method=operation.http_method,
            url=endpoint.full_url,
            params=params,
            data=data,
            headers=headers,
        )


def _parse_body(body: bytes) -> Any:
    if not body:
        return {}
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


def _normalize_error_code(raw: str) -> str:
    # "aws.protocoltests#FooError:http://..." -> "FooError"
    code = raw.split(":", 1)[0]
    return code.rsplit("#", 1)[-1]


def _first_text(*candidates: Any) -> Optional[str]:
    """First non-empty string; services occasionally send numeric codes."""
    for candidate in candidates:
        if isinstance(candidate, str) and candidate:
            return candidate
    return None


def _lowercase_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k.lower(): v for k, v in headers.items()}


class JsonErrorMarshaller:
    """Turns an error response into an ``AWSError``."""

    def marshall(self, response: HttpResponse) -> AWSError:
        headers = _lowercase_headers(response.headers)
        body = _parse_body(response.body)
        body = body if isinstance(body, dict) else {}

        raw_code = _first_text(headers.get("x-amzn-errortype"), body.get("__type"), body.get("code"))
        code = _normalize_error_code(raw_code) if raw_code else f"HTTP{response.status_code}"
        message = _first_text(body.get("message"), body.get("Message"), body.get("errorMessage"))
        if message is None:
            message = response.body.decode("utf-8", errors="replace")

        return AWSError(
            error_type=ErrorType.SERVICE,
            exception_name=code,
            message=message,
            is_retryable=self.is_retryable(response.status_code, code),
            response_code=response.status_code,
            request_id=headers.get("x-amzn-requestid"),
            response_headers=dict(response.headers),
        )

    @staticmethod
    def is_retryable(status_code: int, code: str) -> bool:
        """Classify an error as retryable.

        Informational only: this layer never retries.
        """
        if code in THROTTLING_ERROR_CODES:
            return True
        return status_code in RETRYABLE_STATUS_CODES


class ResponseParser:
    """Maps an HTTP response to the operation's outcome."""

    def __init__(self, error_marshaller: Optional[JsonErrorMarshaller] = None) -> None:
        self.error_marshaller = error_marshaller or JsonErrorMarshaller()

    def parse(
        self, operation: OperationSpec, response: HttpResponse, result_cls: Type[ServiceResult]
    ) -> Outcome[ServiceResult]:
        if not 200 <= response.status_code < 300:
            error = self.error_marshaller.marshall(response)
            logger.debug(
                "service_error_response",
                operation=operation.name,
                status=response.status_code,
                code=error.exception_name,
                request_id=error.request_id,
            )
            return Outcome.failure(error)

        body = _parse_body(response.body)
        if not isinstance(body, dict):
            return Outcome.failure(
                AWSError(
                    error_type=ErrorType.UNKNOWN,
                    exception_name="InvalidResponse",
                    message=f"Unable to parse {operation.name} response as a JSON object",
                    response_code=response.status_code,
                    response_headers=dict(response.headers),
                )
            )

        headers = _lowercase_headers(response.headers)
        metadata = {
            "RequestId": headers.get("x-amzn-requestid"),
            "HTTPStatusCode": response.status_code,
            "HTTPHeaders": headers,
        }
        return Outcome.success(result_cls.model_validate({**body, "ResponseMetadata": metadata}))
