"""AWS License Manager client (awsJson1_1)."""

from ..core import BaseServiceClient, MemberCase, Protocol, ServiceModels, ServiceSpec, SpanPolicy
from ..core.operations import json_operations

SERVICE = ServiceSpec(
    service_name="license-manager",
    client_name="License Manager",
    endpoint_prefix="license-manager",
    protocol=Protocol.AWS_JSON_1_1,
    target_prefix="AWSLicenseManager",
    member_case=MemberCase.PASCAL,
    span_policy=SpanPolicy.NONE,
    operations=json_operations(
        "AcceptGrant",
        "CheckInLicense",
        "CheckoutBorrowLicense",
        "CheckoutLicense",
        "CreateGrant",
        "CreateGrantVersion",
        "CreateLicense",
        "CreateLicenseConfiguration",
        "CreateLicenseConversionTaskForResource",
        "CreateLicenseManagerReportGenerator",
        "CreateLicenseVersion",
        "CreateToken",
        "DeleteGrant",
        "DeleteLicense",
        "DeleteLicenseConfiguration",
        "DeleteLicenseManagerReportGenerator",
        "DeleteToken",
        "ExtendLicenseConsumption",
        "GetAccessToken",
        "GetGrant",
        "GetLicense",
        "GetLicenseConfiguration",
        "GetLicenseConversionTask",
        "GetLicenseManagerReportGenerator",
        "GetLicenseUsage",
        "GetServiceSettings",
        "ListAssociationsForLicenseConfiguration",
        "ListDistributedGrants",
        "ListFailuresForLicenseConfigurationOperations",
        "ListLicenseConfigurations",
        "ListLicenseConversionTasks",
        "ListLicenseManagerReportGenerators",
        "ListLicenseSpecificationsForResource",
        "ListLicenseVersions",
        "ListLicenses",
        "ListReceivedGrants",
        "ListReceivedGrantsForOrganization",
        "ListReceivedLicenses",
        "ListReceivedLicensesForOrganization",
        "ListResourceInventory",
        "ListTagsForResource",
        "ListTokens",
        "ListUsageForLicenseConfiguration",
        "RejectGrant",
        "TagResource",
        "UntagResource",
        "UpdateLicenseConfiguration",
        "UpdateLicenseManagerReportGenerator",
        "UpdateLicenseSpecificationsForResource",
        "UpdateServiceSettings",
    ),
)

models = ServiceModels(SERVICE, __name__)


class LicenseManagerClient(BaseServiceClient):
    """Client for AWS License Manager."""

    service = SERVICE
    models = models
