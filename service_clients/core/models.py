"""Request and result models generated from operation tables.

Request members are PascalCase, as in the service API reference.
Members named by the operation table (required, path and query members)
are declared fields; any other member is accepted as an extra.
"""

from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, create_model

from .endpoint import EndpointParameter
from .operations import OperationSpec, ServiceSpec


class ServiceRequest(BaseModel):
    """Base class of every generated ``<Operation>Request``."""

    model_config = ConfigDict(extra="allow")

    OPERATION: ClassVar[str] = ""

    @property
    def service_request_name(self) -> str:
        return self.OPERATION

    def has_been_set(self, member: str) -> bool:
        """True when member was explicitly given a non-None value."""
        if member in self.model_fields_set:
            return getattr(self, member, None) is not None
        extra = self.model_extra or {}
        return extra.get(member) is not None

    def get_member(self, member: str) -> Any:
        if member in type(self).model_fields:
            return getattr(self, member)
        return (self.model_extra or {}).get(member)

    def endpoint_context_params(self) -> List[EndpointParameter]:
        """Operation-specific endpoint parameters; none for the bundled services."""
        return []

    def members(self) -> Dict[str, Any]:
        """Explicitly set members, JSON-compatible."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class HttpResponseMetadata(BaseModel):
    RequestId: Optional[str] = None
    HTTPStatusCode: int = 200
    HTTPHeaders: Dict[str, str] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Base class of every generated ``<Operation>Result``.

    Response members are kept as sent by the service.
    """

    model_config = ConfigDict(extra="allow")

    OPERATION: ClassVar[str] = ""

    ResponseMetadata: HttpResponseMetadata = Field(default_factory=HttpResponseMetadata)

    def members(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


def build_request_model(operation: OperationSpec, module: str) -> Type[ServiceRequest]:
    fields: Dict[str, Any] = {member: (Optional[Any], None) for member in operation.declared_members}
    model = create_model(
        f"{operation.name}Request",
        __base__=ServiceRequest,
        __module__=module,
        __doc__=f"Request of the {operation.name} operation.",
        **fields,
    )
    model.OPERATION = operation.name
    return model


def build_result_model(operation: OperationSpec, module: str) -> Type[ServiceResult]:
    model = create_model(
        f"{operation.name}Result",
        __base__=ServiceResult,
        __module__=module,
        __doc__=f"Result of the {operation.name} operation.",
    )
    model.OPERATION = operation.name
    return model


class ServiceModels:
    """Generated request/result classes of one service.

    Classes are reachable as attributes, e.g. ``models.DeleteChannelRequest``.
    """

    def __init__(self, service: ServiceSpec, module: str) -> None:
        self.service = service
        self._requests: Dict[str, Type[ServiceRequest]] = {}
        self._results: Dict[str, Type[ServiceResult]] = {}
        for operation in service.operations:
            self._results[operation.name] = build_result_model(operation, module)
            if operation.takes_request:
                self._requests[operation.name] = build_request_model(operation, module)

    def request(self, operation: str) -> Type[ServiceRequest]:
        return self._requests[operation]

    def result(self, operation: str) -> Type[ServiceResult]:
        return self._results[operation]

    def __getattr__(self, name: str):
        for suffix, registry in (("Request", "_requests"), ("Result", "_results")):
            if name.endswith(suffix):
                model = self.__dict__[registry].get(name[: -len(suffix)])
                if model is not None:
                    return model
        raise AttributeError(name)

    def __dir__(self):
        names = [f"{op}Request" for op in self._requests]
        names += [f"{op}Result" for op in self._results]
        return sorted(set(super().__dir__()) | set(names))
