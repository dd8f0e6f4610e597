"""Amazon Inspector (Classic) client (awsJson1_1)."""

from ..core import BaseServiceClient, MemberCase, Protocol, ServiceModels, ServiceSpec, SpanPolicy
from ..core.operations import json_operations

SERVICE = ServiceSpec(
    service_name="inspector",
    client_name="Inspector",
    endpoint_prefix="inspector",
    protocol=Protocol.AWS_JSON_1_1,
    target_prefix="InspectorService",
    member_case=MemberCase.CAMEL,
    span_policy=SpanPolicy.ALL,
    operations=json_operations(
        "AddAttributesToFindings",
        "CreateAssessmentTarget",
        "CreateAssessmentTemplate",
        "CreateExclusionsPreview",
        "CreateResourceGroup",
        "DeleteAssessmentRun",
        "DeleteAssessmentTarget",
        "DeleteAssessmentTemplate",
        "DescribeAssessmentRuns",
        "DescribeAssessmentTargets",
        "DescribeAssessmentTemplates",
        "DescribeCrossAccountAccessRole",
        "DescribeExclusions",
        "DescribeFindings",
        "DescribeResourceGroups",
        "DescribeRulesPackages",
        "GetAssessmentReport",
        "GetExclusionsPreview",
        "GetTelemetryMetadata",
        "ListAssessmentRunAgents",
        "ListAssessmentRuns",
        "ListAssessmentTargets",
        "ListAssessmentTemplates",
        "ListEventSubscriptions",
        "ListExclusions",
        "ListFindings",
        "ListRulesPackages",
        "ListTagsForResource",
        "PreviewAgents",
        "RegisterCrossAccountAccessRole",
        "RemoveAttributesFromFindings",
        "SetTagsForResource",
        "StartAssessmentRun",
        "StopAssessmentRun",
        "SubscribeToEvent",
        "UnsubscribeFromEvent",
        "UpdateAssessmentTarget",
        parameterless=("DescribeCrossAccountAccessRole",),
    ),
)

models = ServiceModels(SERVICE, __name__)


class InspectorClient(BaseServiceClient):
    """Client for Amazon Inspector Classic."""

    service = SERVICE
    models = models
