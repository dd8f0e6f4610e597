"""Building blocks shared by every generated service client."""

from .client import BaseServiceClient
from .endpoint import (
    DefaultEndpointProvider,
    EndpointParameter,
    EndpointProvider,
    ParameterOrigin,
    ResolvedEndpoint,
)
from .models import ServiceModels, ServiceRequest, ServiceResult
from .operations import MemberCase, OperationSpec, Protocol, ServiceSpec, SpanPolicy, json_operations
from .outcome import AWSError, ErrorType, Outcome, OutcomeError
from .signing import SigV4Signer, SigningError, SimpleCredentialsProvider
from .transport import HttpResponse, HttpTransport, TransportError, Urllib3Transport

__all__ = [
    "BaseServiceClient",
    "DefaultEndpointProvider",
    "EndpointParameter",
    "EndpointProvider",
    "ParameterOrigin",
    "ResolvedEndpoint",
    "ServiceModels",
    "ServiceRequest",
    "ServiceResult",
    "MemberCase",
    "OperationSpec",
    "Protocol",
    "ServiceSpec",
    "SpanPolicy",
    "json_operations",
    "AWSError",
    "ErrorType",
    "Outcome",
    "OutcomeError",
    "SigV4Signer",
    "SigningError",
    "SimpleCredentialsProvider",
    "HttpResponse",
    "HttpTransport",
    "TransportError",
    "Urllib3Transport",
]
