"""Table-driven AWS service clients with pluggable telemetry."""

__version__ = "1.0.0"

from .core import AWSError, ErrorType, Outcome, OutcomeError
from .services import (
    DirectConnectClient,
    InspectorClient,
    IoTAnalyticsClient,
    LicenseManagerClient,
    OrganizationsClient,
    RedshiftServerlessClient,
    TranscribeServiceClient,
)

__all__ = [
    "AWSError",
    "ErrorType",
    "Outcome",
    "OutcomeError",
    "DirectConnectClient",
    "InspectorClient",
    "IoTAnalyticsClient",
    "LicenseManagerClient",
    "OrganizationsClient",
    "RedshiftServerlessClient",
    "TranscribeServiceClient",
]
