"""Outcome and error values returned by every client operation.

Operations never raise for expected failures; callers inspect the
returned ``Outcome`` instead.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorType(str, Enum):
    """Where an error was produced."""

    MISSING_PARAMETER = "missing_parameter"
    ENDPOINT_RESOLUTION_FAILURE = "endpoint_resolution_failure"
    NOT_INITIALIZED = "not_initialized"
    CLIENT_SIGNING_FAILURE = "client_signing_failure"
    NETWORK_CONNECTION = "network_connection"
    SERVICE = "service"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AWSError:
    """Error carried by a failed outcome."""

    error_type: ErrorType
    exception_name: str
    message: str
    is_retryable: bool = False
    response_code: Optional[int] = None
    request_id: Optional[str] = None
    response_headers: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.exception_name}: {self.message}"


class OutcomeError(Exception):
    """Raised by ``Outcome.get_result`` when the outcome holds an error."""

    def __init__(self, error: AWSError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a successful result or an error, never both."""

    result: Optional[T] = None
    error: Optional[AWSError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.result is not None:
            raise ValueError("an outcome holds either a result or an error")

    @classmethod
    def success(cls, result: T) -> "Outcome[T]":
        return cls(result=result)

    @classmethod
    def failure(cls, error: AWSError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_success

    def get_result(self) -> T:
        """Return the result or raise ``OutcomeError``."""
        if self.error is not None:
            raise OutcomeError(self.error)
        return self.result


def missing_parameter(field_name: str) -> AWSError:
    return AWSError(
        error_type=ErrorType.MISSING_PARAMETER,
        exception_name="MISSING_PARAMETER",
        message=f"Missing required field [{field_name}]",
        is_retryable=False,
    )


def endpoint_resolution_failure(message: str) -> AWSError:
    return AWSError(
        error_type=ErrorType.ENDPOINT_RESOLUTION_FAILURE,
        exception_name="ENDPOINT_RESOLUTION_FAILURE",
        message=message,
        is_retryable=False,
    )


def not_initialized(operation: str) -> AWSError:
    return AWSError(
        error_type=ErrorType.NOT_INITIALIZED,
        exception_name="NOT_INITIALIZED",
        message=f"Unable to call {operation}: client is not initialized (or already terminated)",
        is_retryable=False,
    )
