"""Generated service clients."""

from .directconnect import DirectConnectClient
from .inspector import InspectorClient
from .iotanalytics import IoTAnalyticsClient
from .license_manager import LicenseManagerClient
from .organizations import OrganizationsClient
from .redshift_serverless import RedshiftServerlessClient
from .transcribe import TranscribeServiceClient

ALL_CLIENTS = (
    DirectConnectClient,
    InspectorClient,
    IoTAnalyticsClient,
    LicenseManagerClient,
    OrganizationsClient,
    RedshiftServerlessClient,
    TranscribeServiceClient,
)

__all__ = [
    "ALL_CLIENTS",
    "DirectConnectClient",
    "InspectorClient",
    "IoTAnalyticsClient",
    "LicenseManagerClient",
    "OrganizationsClient",
    "RedshiftServerlessClient",
    "TranscribeServiceClient",
]
