"""AWS Organizations client (awsJson1_1, global service)."""

from ..core import BaseServiceClient, MemberCase, Protocol, ServiceModels, ServiceSpec, SpanPolicy
from ..core.operations import json_operations

SERVICE = ServiceSpec(
    service_name="organizations",
    client_name="Organizations",
    endpoint_prefix="organizations",
    protocol=Protocol.AWS_JSON_1_1,
    target_prefix="AWSOrganizationsV20161128",
    member_case=MemberCase.PASCAL,
    span_policy=SpanPolicy.PARAMETERLESS,
    operations=json_operations(
        "AcceptHandshake",
        "AttachPolicy",
        "CancelHandshake",
        "CloseAccount",
        "CreateAccount",
        "CreateGovCloudAccount",
        "CreateOrganization",
        "CreateOrganizationalUnit",
        "CreatePolicy",
        "DeclineHandshake",
        "DeleteOrganization",
        "DeleteOrganizationalUnit",
        "DeletePolicy",
        "DeleteResourcePolicy",
        "DeregisterDelegatedAdministrator",
        "DescribeAccount",
        "DescribeCreateAccountStatus",
        "DescribeEffectivePolicy",
        "DescribeHandshake",
        "DescribeOrganization",
        "DescribeOrganizationalUnit",
        "DescribePolicy",
        "DescribeResourcePolicy",
        "DetachPolicy",
        "DisableAWSServiceAccess",
        "DisablePolicyType",
        "EnableAWSServiceAccess",
        "EnableAllFeatures",
        "EnablePolicyType",
        "InviteAccountToOrganization",
        "LeaveOrganization",
        "ListAWSServiceAccessForOrganization",
        "ListAccounts",
        "ListAccountsForParent",
        "ListChildren",
        "ListCreateAccountStatus",
        "ListDelegatedAdministrators",
        "ListDelegatedServicesForAccount",
        "ListHandshakesForAccount",
        "ListHandshakesForOrganization",
        "ListOrganizationalUnitsForParent",
        "ListParents",
        "ListPolicies",
        "ListPoliciesForTarget",
        "ListRoots",
        "ListTagsForResource",
        "ListTargetsForPolicy",
        "MoveAccount",
        "PutResourcePolicy",
        "RegisterDelegatedAdministrator",
        "RemoveAccountFromOrganization",
        "TagResource",
        "UntagResource",
        "UpdateOrganizationalUnit",
        "UpdatePolicy",
        parameterless=(
            "DeleteOrganization",
            "DeleteResourcePolicy",
            "DescribeOrganization",
            "DescribeResourcePolicy",
            "LeaveOrganization",
        ),
    ),
)

models = ServiceModels(SERVICE, __name__)


class OrganizationsClient(BaseServiceClient):
    """Client for AWS Organizations.

    Organizations is a global service: in the ``aws`` partition every
    request goes to, and is signed for, us-east-1.
    """

    service = SERVICE
    models = models
    GLOBAL_REGION = "us-east-1"
