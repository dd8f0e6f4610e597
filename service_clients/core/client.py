"""Shared operation executor of every generated service client.

A service module declares a ``ServiceSpec`` and subclasses
``BaseServiceClient``; one method per operation is attached to the
subclass when it is defined. Every operation goes through ``execute``:

1. guard against use after ``shutdown``
2. check that an endpoint provider is configured
3. check required members
4. open a span (per the service's span policy)
5. time the whole call as ``smithy.client.duration``
6. resolve the endpoint, timed as ``smithy.client.resolve_endpoint_duration``
7. append the operation path, serialize, sign and send once, recording
   any transport metrics (e.g. ``smithy.client.http.throughput``)
"""

import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, ClassVar, Dict, Optional, Tuple

import structlog

from smithy_telemetry import (
    SMITHY_CLIENT_DURATION,
    SMITHY_RESOLVE_ENDPOINT_DURATION,
    SpanKind,
    TelemetryProvider,
    TraceSpanStatus,
    create_noop_provider,
    emit_core_http_metrics,
    make_call_with_timing,
)
from smithy_telemetry.interfaces import Meter
from smithy_telemetry.logging import operation_log_context

from ..config import ClientConfiguration, get_config
from .endpoint import DefaultEndpointProvider, EndpointParameter, EndpointProvider, ResolvedEndpoint
from .models import ServiceModels, ServiceRequest, ServiceResult
from .operations import OperationSpec, ServiceSpec
from .outcome import (
    AWSError,
    ErrorType,
    Outcome,
    endpoint_resolution_failure,
    missing_parameter,
    not_initialized,
)
from .protocol import RequestSerializer, ResponseParser
from .signing import SigningError, SigV4Signer, SimpleCredentialsProvider, default_credentials_provider
from .transport import HttpTransport, TransportError, Urllib3Transport

logger = structlog.get_logger(__name__)

# Parameterless operations resolve with this shared, empty parameter list.
EMPTY_ENDPOINT_PARAMETERS: Tuple[EndpointParameter, ...] = ()


class BaseServiceClient:
    """Base class of the generated service clients.

    Args:
        config: Client configuration; defaults to the environment
        credentials: Static botocore credentials
        credentials_provider: Object exposing ``load_credentials()``;
            defaults to botocore's credential chain
        endpoint_provider: Endpoint provider; defaults to
            ``DefaultEndpointProvider`` for the service
        telemetry_provider: Telemetry provider; defaults to no-op
        transport: HTTP transport; defaults to ``Urllib3Transport``
    """

    service: ClassVar[ServiceSpec]
    models: ClassVar[ServiceModels]
    SERVICE_NAME: ClassVar[str] = ""
    # Region global services are routed to in the aws partition.
    GLOBAL_REGION: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        service = cls.__dict__.get("service")
        if service is None:
            return
        cls.SERVICE_NAME = service.service_name
        for operation in service.operations:
            _attach_operation(cls, operation)

    def __init__(
        self,
        config: Optional[ClientConfiguration] = None,
        credentials=None,
        credentials_provider=None,
        endpoint_provider: Optional[EndpointProvider] = None,
        telemetry_provider: Optional[TelemetryProvider] = None,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self.config = config or get_config().client

        if credentials_provider is None:
            if credentials is not None:
                credentials_provider = SimpleCredentialsProvider(credentials)
            else:
                credentials_provider = default_credentials_provider()

        self._signer = SigV4Signer(self.service.service_name, self.config.region, credentials_provider)
        self._serializer = RequestSerializer(self.service, self.config.user_agent)
        self._parser = ResponseParser()
        self._transport = transport or Urllib3Transport.from_config(self.config)

        self._endpoint_provider: Optional[EndpointProvider] = endpoint_provider or DefaultEndpointProvider(
            self.service.endpoint_prefix, global_region=self.GLOBAL_REGION
        )
        self._endpoint_provider.init_built_in_parameters(self.config)

        self._telemetry = telemetry_provider or create_noop_provider()
        self._telemetry.run_init()

        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()
        self._initialized = True

        logger.debug(
            "service_client_initialized",
            client=self.client_name,
            region=self.config.region,
            endpoint_url=self.config.endpoint_url,
        )

    @property
    def client_name(self) -> str:
        return self.service.client_name

    @property
    def telemetry_provider(self) -> TelemetryProvider:
        return self._telemetry

    @property
    def endpoint_provider(self) -> Optional[EndpointProvider]:
        return self._endpoint_provider

    @endpoint_provider.setter
    def endpoint_provider(self, provider: Optional[EndpointProvider]) -> None:
        if provider is not None:
            provider.init_built_in_parameters(self.config)
        self._endpoint_provider = provider

    def override_endpoint(self, endpoint: str) -> None:
        """Send every subsequent call to endpoint."""
        if self._endpoint_provider is None:
            logger.error("endpoint_override_failed", client=self.client_name, reason="no endpoint provider")
            return
        self._endpoint_provider.override_endpoint(endpoint)

    # -- synchronous path -------------------------------------------------

    def execute(
        self, operation_name: str, request: Optional[ServiceRequest] = None, **members: Any
    ) -> Outcome[ServiceResult]:
        """Run one operation.

        Args:
            operation_name: Operation name, e.g. "DeleteChannel"
            request: Request model instance
            **members: Request members, used when no request is given

        Returns:
            Outcome holding the operation result or an error

        Raises:
            ValueError: If the service has no such operation
            TypeError: If the arguments do not match the operation
        """
        operation = self.service.operation(operation_name)
        with operation_log_context(self.client_name, operation.name):
            return self._execute(operation, request, members)

    def _execute(
        self, operation: OperationSpec, request: Optional[ServiceRequest], members: Dict[str, Any]
    ) -> Outcome[ServiceResult]:
        if not self._initialized:
            logger.error("client_not_initialized", client=self.client_name, operation=operation.name)
            return Outcome.failure(not_initialized(operation.name))

        if self._endpoint_provider is None:
            logger.error("endpoint_provider_missing", client=self.client_name, operation=operation.name)
            return Outcome.failure(endpoint_resolution_failure("Unexpected null endpoint provider"))

        request = self._build_request(operation, request, members)

        for member in operation.required:
            if not request.has_been_set(member):
                logger.error(
                    "required_field_missing",
                    client=self.client_name,
                    operation=operation.name,
                    field=member,
                    message=f"Required field: {member}, is not set",
                )
                return Outcome.failure(missing_parameter(member))

        attributes = {"rpc.method": operation.name, "rpc.service": self.client_name}

        if not self.service.is_traced(operation):
            return self._timed_call(operation, request, attributes)

        tracer = self._telemetry.get_tracer(self.client_name, {})
        with tracer.create_span(
            f"{self.client_name}.{operation.name}",
            {**attributes, "rpc.system": "aws-api"},
            SpanKind.CLIENT,
        ) as span:
            outcome = self._timed_call(operation, request, attributes)
            span.set_status(TraceSpanStatus.OK if outcome.is_success else TraceSpanStatus.ERROR)
            return outcome

    def _build_request(
        self, operation: OperationSpec, request: Optional[ServiceRequest], members: Dict[str, Any]
    ) -> Optional[ServiceRequest]:
        if not operation.takes_request:
            if request is not None or members:
                raise TypeError(f"{operation.python_name}() takes no request")
            return None

        model = self.models.request(operation.name)
        if request is None:
            return model(**members)
        if members:
            raise TypeError(f"{operation.python_name}() takes a request or keyword members, not both")
        if not isinstance(request, model):
            raise TypeError(
                f"{operation.python_name}() expects {model.__name__}, got {type(request).__name__}"
            )
        return request

    def _timed_call(
        self, operation: OperationSpec, request: Optional[ServiceRequest], attributes: Dict[str, str]
    ) -> Outcome[ServiceResult]:
        meter = self._telemetry.get_meter(self.client_name, {})
        return make_call_with_timing(
            lambda: self._resolve_and_send(operation, request, meter, attributes),
            SMITHY_CLIENT_DURATION,
            meter,
            attributes,
        )

    def _resolve_and_send(
        self,
        operation: OperationSpec,
        request: Optional[ServiceRequest],
        meter: Meter,
        attributes: Dict[str, str],
    ) -> Outcome[ServiceResult]:
        params = request.endpoint_context_params() if request is not None else EMPTY_ENDPOINT_PARAMETERS
        resolved = make_call_with_timing(
            lambda: self._endpoint_provider.resolve_endpoint(params),
            SMITHY_RESOLVE_ENDPOINT_DURATION,
            meter,
            attributes,
        )
        if not resolved.is_success:
            logger.error(
                "endpoint_resolution_failed",
                client=self.client_name,
                operation=operation.name,
                reason=resolved.error.message,
            )
            return Outcome.failure(endpoint_resolution_failure(resolved.error.message))

        # Fresh path segments per call.
        endpoint = resolved.result.copy()
        for is_member, text in operation.path_parts():
            if is_member:
                endpoint.add_path_segment(request.get_member(text))
            else:
                endpoint.add_path_segments(text)

        return self._send(operation, request, endpoint, meter, attributes)

    def _send(
        self,
        operation: OperationSpec,
        request: Optional[ServiceRequest],
        endpoint: ResolvedEndpoint,
        meter: Meter,
        attributes: Dict[str, str],
    ) -> Outcome[ServiceResult]:
        aws_request = self._serializer.serialize(operation, request, endpoint)

        try:
            self._signer.sign(aws_request, endpoint.signing_region)
        except SigningError as e:
            logger.error("request_signing_failed", client=self.client_name, operation=operation.name, error=str(e))
            return Outcome.failure(
                AWSError(
                    error_type=ErrorType.CLIENT_SIGNING_FAILURE,
                    exception_name="CLIENT_SIGNING_FAILURE",
                    message=str(e),
                )
            )

        try:
            response = self._transport.send(aws_request.prepare())
        except TransportError as e:
            logger.warning("request_failed", client=self.client_name, operation=operation.name, error=str(e))
            return Outcome.failure(
                AWSError(
                    error_type=ErrorType.NETWORK_CONNECTION,
                    exception_name="NETWORK_CONNECTION",
                    message=str(e),
                    is_retryable=True,
                )
            )

        emit_core_http_metrics(response.metrics, meter, attributes)
        return self._parser.parse(operation, response, self.models.result(operation.name))

    # -- asynchronous path ------------------------------------------------

    def submit(self, operation_name: str, *args: Any, **kwargs: Any) -> "Future[Outcome[ServiceResult]]":
        """Schedule an operation on the client executor."""
        operation = self.service.operation(operation_name)
        # Checked under the lock shutdown takes, so no executor outlives it
        with self._lock:
            if self._initialized:
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=self.config.executor_max_workers,
                        thread_name_prefix=self.service.service_name,
                    )
                return self._executor.submit(self.execute, operation.name, *args, **kwargs)

        future: Future = Future()
        future.set_result(Outcome.failure(not_initialized(operation.name)))
        return future

    async def execute_async(self, operation_name: str, *args: Any, **kwargs: Any) -> Outcome[ServiceResult]:
        """Await an operation run on the client executor."""
        return await asyncio.wrap_future(self.submit(operation_name, *args, **kwargs))

    # -- lifecycle --------------------------------------------------------

    def shutdown(self, wait: bool = True) -> None:
        """Wait for in-flight calls, close the transport and refuse new calls."""
        with self._lock:
            if not self._initialized:
                return
            self._initialized = False
            executor, self._executor = self._executor, None

        if executor is not None:
            executor.shutdown(wait=wait)
        self._transport.close()
        logger.info("service_client_shutdown", client=self.client_name)

    def close(self) -> None:
        self.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self.config.region!r})"


def _attach_operation(cls, operation: OperationSpec) -> None:
    name = operation.python_name

    if operation.takes_request:

        def method(self, request=None, **members):
            return self.execute(operation.name, request, **members)

        def callable_method(self, request=None, **members):
            return self.submit(operation.name, request, **members)

        async def async_method(self, request=None, **members):
            return await self.execute_async(operation.name, request, **members)

    else:

        def method(self):
            return self.execute(operation.name)

        def callable_method(self):
            return self.submit(operation.name)

        async def async_method(self):
            return await self.execute_async(operation.name)

    for suffix, func, doc in (
        ("", method, f"Call {operation.name}; returns an Outcome of {operation.name}Result."),
        ("_callable", callable_method, f"Schedule {operation.name}; returns a Future of its Outcome."),
        ("_async", async_method, f"Await {operation.name} run on the client executor."),
    ):
        func.__name__ = name + suffix
        func.__qualname__ = f"{cls.__name__}.{name}{suffix}"
        func.__doc__ = doc
        setattr(cls, name + suffix, func)
